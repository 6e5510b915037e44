from __future__ import annotations

from enum import Enum


class StudentStatus(str, Enum):
    """Enrollment state of a student."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"


class GradeLevel(str, Enum):
    """The 13 enrollment levels offered by the school."""

    KINDERGARTEN = "Kindergarten"
    GRADE_1 = "1st Grade"
    GRADE_2 = "2nd Grade"
    GRADE_3 = "3rd Grade"
    GRADE_4 = "4th Grade"
    GRADE_5 = "5th Grade"
    GRADE_6 = "6th Grade"
    GRADE_7 = "7th Grade"
    GRADE_8 = "8th Grade"
    GRADE_9 = "9th Grade"
    GRADE_10 = "10th Grade"
    GRADE_11 = "11th Grade"
    GRADE_12 = "12th Grade"


class AttendanceStatus(str, Enum):
    """Daily attendance mark; one per (student, date)."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class ParentRelationship(str, Enum):
    MOTHER = "mother"
    FATHER = "father"
    STEPMOTHER = "stepmother"
    STEPFATHER = "stepfather"
    GRANDMOTHER = "grandmother"
    GRANDFATHER = "grandfather"
    AUNT = "aunt"
    UNCLE = "uncle"
    GUARDIAN = "guardian"
    OTHER = "other"


class EmergencyRelationship(str, Enum):
    PARENT = "Parent"
    GRANDPARENT = "Grandparent"
    AUNT = "Aunt"
    UNCLE = "Uncle"
    SIBLING = "Sibling"
    FAMILY_FRIEND = "Family Friend"
    OTHER = "Other"


class CommunicationType(str, Enum):
    MEETING = "meeting"
    PHONE = "phone"
    EMAIL = "email"
    OTHER = "other"


class Term(str, Enum):
    FIRST_QUARTER = "First Quarter"
    SECOND_QUARTER = "Second Quarter"
    THIRD_QUARTER = "Third Quarter"
    FOURTH_QUARTER = "Fourth Quarter"
    FIRST_SEMESTER = "First Semester"
    SECOND_SEMESTER = "Second Semester"
    FINAL_EXAM = "Final Exam"
    MIDTERM_EXAM = "Mid-term Exam"


class LetterGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
