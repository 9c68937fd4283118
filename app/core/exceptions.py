"""
Exceptions raised by the persistence layer.
"""


class NotFoundError(Exception):
    """A requested record does not exist."""
    pass


class StudentNotFoundError(NotFoundError):
    def __init__(self, student_id):
        self.student_id = student_id
        super().__init__(f"Student {student_id} not found")
