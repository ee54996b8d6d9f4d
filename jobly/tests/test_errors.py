"""Tests for domain error to HTTP status mapping."""

import pytest

from jobly.api.errors import status_for, to_http
from jobly.domain.exceptions import (
    DomainError,
    DuplicateEntityError,
    EmptyUpdateError,
    ForbiddenError,
    InvalidRangeError,
    NotFoundError,
    UnauthorizedError,
    UnknownFilterKeyError,
)


@pytest.mark.parametrize(
    "exc, expected",
    [
        (NotFoundError("No company: x"), 404),
        (EmptyUpdateError(), 400),
        (InvalidRangeError("bad range"), 400),
        (UnknownFilterKeyError("companyAge"), 400),
        (DuplicateEntityError("Duplicate company: c1"), 400),
        (UnauthorizedError("Invalid username/password"), 401),
        (ForbiddenError("nope"), 403),
        (DomainError("other"), 400),
    ],
)
def test_status_for(exc, expected):
    assert status_for(exc) == expected


def test_to_http_keeps_message():
    http_exc = to_http(UnknownFilterKeyError("companyAge"))

    assert http_exc.status_code == 400
    assert http_exc.detail == "companyAge is not a valid filter"
