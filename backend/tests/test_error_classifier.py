import pytest

from loketh.services.diagnostics import (
    DEFAULT_ERROR,
    ERROR_SIGNATURES,
    ErrorRecord,
    classify,
    error_message,
    match_signature,
)


class ProviderError(Exception):
    """Mimics provider errors that carry a separate `message`."""

    def __init__(self, message: str, code: int):
        super().__init__(code)
        self.message = message
        self.code = code


class Carrier:
    def __init__(self, message):
        self.message = message


class Unprintable:
    def __str__(self):
        raise RuntimeError("no str")

    def __repr__(self):
        raise RuntimeError("no repr")


def test_signature_table_order_and_contents():
    assert [pattern for pattern, _ in ERROR_SIGNATURES] == [
        "You have no Metamask installed",
        "You are connected to the wrong network",
        "User rejected the request",
        "User denied transaction signature",
        "Loketh: Organizer can not buy their own event",
        "Loketh: Participant already bought the ticket",
    ]
    denied = dict(ERROR_SIGNATURES)["User denied transaction signature"]
    assert denied == ErrorRecord(
        display_error=False,
        log=False,
        message="MetaMask Tx Signature: User denied transaction signature.",
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("You have no Metamask installed!", "You have no Metamask installed."),
        (
            "Error: You are connected to the wrong network (chain 3)",
            "You are connected to the wrong network.",
        ),
        (
            "MetaMask: User rejected the request.",
            "You rejected the connect request.",
        ),
        (
            "VM Exception: revert Loketh: Organizer can not buy their own event",
            "You can not buy a ticket from your own event.",
        ),
    ],
)
def test_known_signatures_are_displayed_not_logged(raw, expected):
    record = classify(raw)

    assert record.display_error is True
    assert record.log is False
    assert record.message == expected


def test_denied_signature_from_exception():
    record = classify(Exception("User denied transaction signature by account"))

    assert record == ErrorRecord(
        display_error=False,
        log=False,
        message="MetaMask Tx Signature: User denied transaction signature.",
    )


def test_already_bought_from_string():
    record = classify("revert Loketh: Participant already bought the ticket")

    assert record == ErrorRecord(
        display_error=True, log=False, message="You are already buy this ticket."
    )


def test_unknown_mapping_message_falls_back_to_default():
    record = classify({"message": "timeout"})

    assert record == ErrorRecord(
        display_error=True, log=True, message="Something went wrong."
    )


def test_exception_message_attribute_is_preferred():
    error = ProviderError("User rejected the request.", code=4001)

    assert error_message(error) == "User rejected the request."
    assert classify(error).message == "You rejected the connect request."


def test_object_with_message_attribute():
    record = classify(Carrier("You have no Metamask installed"))

    assert record.message == "You have no Metamask installed."


def test_matching_is_case_sensitive():
    assert classify("user rejected the request") == DEFAULT_ERROR


def test_first_declared_pattern_wins():
    message = (
        "User rejected the request while You are connected to the wrong network"
    )

    # "wrong network" is declared before "User rejected the request"
    assert classify(message).message == "You are connected to the wrong network."
    assert match_signature(message).message == "You are connected to the wrong network."


@pytest.mark.parametrize(
    "value",
    [None, 42, 3.5, [], {}, {"message": ""}, {"code": 4001}, Carrier(None), object()],
)
def test_odd_inputs_resolve_to_default(value):
    assert classify(value) == DEFAULT_ERROR


def test_unprintable_input_does_not_raise():
    assert classify(Unprintable()) == DEFAULT_ERROR
    assert error_message(Unprintable()) == "Unprintable"


def test_mapping_without_message_is_coerced_to_text():
    assert error_message({"code": 4001}) == "{'code': 4001}"
    assert error_message(None) == "None"


def test_default_message_classifies_as_default_again():
    first = classify(RuntimeError("connection reset"))

    assert classify(first.message) == first == DEFAULT_ERROR


def test_records_are_fresh_copies():
    first = classify("totally unknown")
    second = classify("totally unknown")

    assert first == second
    assert first is not second
    assert first is not DEFAULT_ERROR

    matched = classify("User rejected the request")
    assert matched is not dict(ERROR_SIGNATURES)["User rejected the request"]


def test_match_signature_returns_none_for_unknown():
    assert match_signature("nothing to see") is None


class BrokenMessageError(Exception):
    @property
    def message(self):
        raise RuntimeError("provider proxy blew up")


def test_broken_message_attribute_falls_back_to_type_name():
    assert error_message(BrokenMessageError("x")) == "BrokenMessageError"
    assert classify(BrokenMessageError("x")) == DEFAULT_ERROR
