# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Contract Validator for Trivia Night integration tests.

Validates emitted Socket.IO events against the schemas in
contracts/socketio_contracts.json.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from jsonschema import Draft7Validator, ValidationError, validate

logger = logging.getLogger(__name__)


class ContractValidator:
    """
    Validates Socket.IO event arguments against contract schemas.

    Events whose contract payload is ``null`` must be sent without
    arguments; events with a schema must carry exactly one argument that
    matches it. Events missing from the contract are skipped.

    Example usage:
        validator = ContractValidator("contracts/socketio_contracts.json")
        validator.validate_event("display:mode", ["answers"])
    """

    def __init__(self, socketio_contract_path: str, strict: bool = True):
        """
        Args:
            socketio_contract_path: Path to socketio_contracts.json file
            strict: If True, raise on validation errors. If False, only log warnings.
        """
        self.contract_path = Path(socketio_contract_path)
        self.strict = strict

        if not self.contract_path.exists():
            raise FileNotFoundError(f"Contract file not found: {self.contract_path}")

        with open(self.contract_path, "r") as f:
            self.contracts = json.load(f)

        self.event_schemas: Dict[str, Dict] = {}
        self.no_payload_events: Set[str] = set()

        for category, details in self.contracts.get("contracts", {}).items():
            for event_name, event_spec in details.get("events", {}).items():
                if event_spec.get("payload") is None:
                    self.no_payload_events.add(event_name)
                else:
                    Draft7Validator.check_schema(event_spec["payload"])
                    self.event_schemas[event_name] = event_spec["payload"]

        logger.info(
            f"Loaded {len(self.event_schemas)} event schemas and "
            f"{len(self.no_payload_events)} payload-less events"
        )

    def validate_event(self, event_type: str, args: List[Any]) -> None:
        """
        Validate one emitted event.

        Args:
            event_type: Event name (e.g. "leaderboard:update")
            args: Positional arguments the event was emitted with

        Raises:
            AssertionError: If validation fails and strict=True
        """
        try:
            if event_type in self.no_payload_events:
                if args:
                    raise AssertionError(f"expected no arguments, got {args!r}")
            elif event_type in self.event_schemas:
                if len(args) != 1:
                    raise AssertionError(f"expected exactly one argument, got {len(args)}")
                try:
                    validate(instance=args[0], schema=self.event_schemas[event_type])
                except ValidationError as e:
                    raise AssertionError(e.message) from e
            else:
                logger.debug(f"No schema found for {event_type}, skipping validation")
        except AssertionError as e:
            error_msg = f"Contract validation failed for {event_type}: {e}"
            if self.strict:
                raise AssertionError(error_msg) from e
            logger.warning(error_msg)

    def get_event_schema(self, event_type: str) -> Optional[Dict]:
        return self.event_schemas.get(event_type)

    def list_event_types(self) -> List[str]:
        """Every event named in the contract, with or without a payload."""
        return sorted(set(self.event_schemas) | self.no_payload_events)

    def __repr__(self) -> str:
        return (
            f"ContractValidator(schemas={len(self.event_schemas)}, "
            f"strict={self.strict})"
        )
