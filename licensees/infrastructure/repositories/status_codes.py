"""
Mapping between LicenseeStatus and its persisted integer code.
"""
from core.domain.value_objects import LicenseeStatus
from licensees.infrastructure.models import (
    STATUS_ACTIVE,
    STATUS_EXPIRED,
    STATUS_INACTIVE,
)

STATUS_TO_CODE = {
    LicenseeStatus.INACTIVE: STATUS_INACTIVE,
    LicenseeStatus.ACTIVE: STATUS_ACTIVE,
    LicenseeStatus.EXPIRED: STATUS_EXPIRED,
}

CODE_TO_STATUS = {code: status for status, code in STATUS_TO_CODE.items()}


def to_code(status: LicenseeStatus) -> int:
    return STATUS_TO_CODE[status]


def to_status(code: int) -> LicenseeStatus:
    try:
        return CODE_TO_STATUS[code]
    except KeyError:
        raise ValueError(f"Unknown licensee status code: {code!r}") from None
