"""Service layer — operations over value sets and the field type registry.

Every public service method returns a :class:`ServiceResult`.
"""
