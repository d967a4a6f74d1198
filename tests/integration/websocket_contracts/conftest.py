# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Fixtures for Socket.IO contract tests."""

from pathlib import Path

import pytest

from .contract_validator import ContractValidator

CONTRACTS_SCHEMA_PATH = (
    Path(__file__).resolve().parents[3] / "contracts" / "socketio_contracts.json"
)


@pytest.fixture(scope="session")
def contract_validator() -> ContractValidator:
    """Session-wide validator for the Socket.IO contracts."""
    return ContractValidator(str(CONTRACTS_SCHEMA_PATH), strict=True)


@pytest.fixture
def assert_contracts(sio, contract_validator):
    """Validate every event emitted so far on the fake server."""

    def _check():
        assert sio.emitted, "no events were emitted"
        for event in sio.emitted:
            contract_validator.validate_event(event.event, event.args)

    return _check
