class MalformedRecord(Exception):
    """input row could not be turned into a record"""


class InvariantViolation(Exception):
    """tree ordering or balance invariant broken"""


class ResourceUnavailable(Exception):
    """dataset or results file could not be opened"""
