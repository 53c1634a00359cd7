"""Kinship engine exceptions."""


class KinshipError(Exception):
    """Base class for kinship engine errors."""


class MemberRecordError(KinshipError):
    """A raw record could not be normalized into a Member."""

    def __init__(self, message: str, record: object = None):
        super().__init__(message)
        self.record = record
