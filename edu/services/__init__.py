"""
Use cases for the edu CLIs.

Each service module orchestrates a RecordStore to implement the business rules
(unique task names, user field validation). CLIs call these services instead
of manipulating the JSON files directly.
"""
