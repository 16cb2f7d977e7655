from __future__ import annotations

from cheesebook.domain.errors import (
    DataLoadingError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from cheesebook.domain.ports import UseCaseError
from cheesebook.usecases.error_mapping import map_domain_error


def test_use_case_error_passes_through() -> None:
    err = UseCaseError("INVALID_INDEX", "bad index")

    assert map_domain_error(err, default_code="X") is err


def test_duplicate_and_not_found_codes() -> None:
    dup = map_domain_error(DuplicateEntityError("customer"), default_code="X")
    missing = map_domain_error(EntityNotFoundError("order"), default_code="X")

    assert dup.code == "DUPLICATE_ENTITY"
    assert dup.message == "This customer already exists in the cheese book"
    assert missing.code == "ENTITY_NOT_FOUND"
    assert missing.message == "This order does not exist in the cheese book"


def test_invalid_argument_and_loading_errors() -> None:
    invalid = map_domain_error(InvalidArgumentError("predicate must not be None"), default_code="X")
    loading = map_domain_error(DataLoadingError("broken file", path="/tmp/a.json"), default_code="X")

    assert invalid.code == "INVALID_ARGUMENT"
    assert invalid.message == "predicate must not be None"
    assert loading.code == "LOAD_FAILED"
    assert loading.meta == {"path": "/tmp/a.json"}


def test_unknown_errors_use_default_code() -> None:
    mapped = map_domain_error(RuntimeError(""), default_code="COMMAND_FAILED", default_message="Oops.")

    assert mapped.code == "COMMAND_FAILED"
    assert mapped.message == "Oops."
