"""
In-memory stand-ins for the Firestore client and sample collection documents.
"""

import itertools

from src.utils.exceptions import BackendWriteException


COURSE_DOCS = [
    (
        "c1",
        {
            "title": "Python Basics",
            "description": "Start here",
            "iconName": "Monitor",
            "isPublished": True,
            "sections": [
                {
                    "id": "s_1",
                    "title": "Getting Started",
                    "lessons": [
                        {"id": "l_1", "title": "Intro", "type": "richText", "content": "<p>Hello</p>"},
                        {
                            "id": "l_2",
                            "title": "Docs",
                            "type": "externalDoc",
                            "content": "https://docs.python.org/3/",
                        },
                    ],
                }
            ],
        },
    ),
    ("c2", {"title": "Unreleased", "iconName": "Rocket", "isPublished": False, "sections": None}),
]

ASSESSMENT_DOCS = [
    (
        "a1",
        {
            "title": "Python Quiz",
            "courseId": "c1",
            "type": "Quiz",
            "questions": [
                {"id": "q1", "text": "First?", "options": ["A", "B"], "answer": "A"},
                {"id": "q2", "text": "Second?", "options": ["B", "C"], "answer": "B"},
            ],
        },
    ),
    ("a2", {"title": "Empty Quiz", "courseId": "gone", "questions": []}),
]

BLOG_DOCS = [
    ("b1", {"title": "Welcome", "author": "Admin", "date": "2024-05-01", "content": "<p>Hi</p>", "tags": ["news"]}),
]


class FakeWatch:
    def __init__(self, callback):
        self.callback = callback
        self.is_active = True
        self.unsubscribed = False

    def unsubscribe(self):
        self.unsubscribed = True
        self.is_active = False


class FakeFirestoreClient:
    """Keeps documents in dicts; set fail_with to make every write fail."""

    def __init__(self):
        self.docs = {"courses": {}, "assessments": {}, "blogs": {}}
        self.watches = {}
        self.fail_with = None
        self.closed = False
        self._ids = itertools.count(1)

    def _check(self):
        if self.fail_with:
            raise BackendWriteException(self.fail_with)

    async def add(self, name, data):
        self._check()
        doc_id = f"doc_{next(self._ids)}"
        self.docs[name][doc_id] = data
        return doc_id

    async def set(self, name, doc_id, data):
        self._check()
        self.docs[name][doc_id] = data

    async def delete(self, name, doc_id):
        self._check()
        self.docs[name].pop(doc_id, None)

    def watch(self, name, on_snapshot):
        watch = FakeWatch(on_snapshot)
        self.watches[name] = watch
        return watch

    def emit(self, name, docs):
        self.watches[name].callback(docs)

    def close(self):
        self.closed = True

