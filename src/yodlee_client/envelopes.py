"""
Yodlee error envelopes and response classification.

Yodlee answers HTTP 200 whether a call succeeded or not. A failure is only
visible in the shape of the JSON body, which is one of three error
envelopes:

- ErrorInfo:            {"errorCode", "errorMessage", "errorDetail", "referenceCode"}
- MultipleErrorInfo:    {"Error": [ErrorInfo, ...]}
- ErrorOccurredMessage: {"errorOccurred": "true", "exceptionType", "referenceCode", "message"}

classify() tries each envelope in a fixed order and reports the first one
that flags an error. A body no envelope flags is presumed to be a success
payload; decoding it into the caller's type is a separate step.

The envelopes are assumed mutually exclusive on real responses: an error
body never also decodes as a different envelope with a different verdict.
The one known overlap, the flag envelope's referenceCode, is resolved by
ErrorInfo.claims().

A body that carries an envelope's keys with values of the wrong type is a
decode error, never a success.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .decoding import as_dict, get_list, get_str, lookup
from .errors import YodleeAPIError, YodleeDecodeError

logger = logging.getLogger(__name__)


class ErrorEnvelope(ABC):
    """Common capability of every error envelope."""

    @classmethod
    @abstractmethod
    def from_json(cls, data: Any) -> "ErrorEnvelope":
        """Decode a parsed JSON document. Raises YodleeDecodeError on shape mismatch."""

    # JSON keys that mark a document as this envelope
    FIELDS: tuple[str, ...] = ()

    @classmethod
    def claims(cls, data: Any) -> bool:
        """True when the document carries at least one of this envelope's keys."""
        if not isinstance(data, dict):
            return False
        return any(lookup(data, key, fold_case=True) is not None for key in cls.FIELDS)

    @abstractmethod
    def is_error(self) -> bool:
        ...

    @abstractmethod
    def error_message(self) -> str:
        ...

    def error_messages(self) -> list[str]:
        """Discrete failure messages carried by this envelope."""
        return [self.error_message()]


@dataclass
class ErrorInfo(ErrorEnvelope):
    """Single error: code, message, detail and reference."""

    error_code: str = ""
    error_message_text: str = ""
    error_detail: str = ""
    reference_code: str = ""

    FIELDS = ("errorCode", "errorMessage", "errorDetail", "referenceCode")

    @classmethod
    def claims(cls, data: Any) -> bool:
        # Flag envelopes also carry referenceCode.
        if not super().claims(data):
            return False
        return lookup(data, "errorOccurred", fold_case=True) is None

    @classmethod
    def from_json(cls, data: Any) -> "ErrorInfo":
        data = as_dict(data, "ErrorInfo")
        return cls(
            error_code=get_str(data, "errorCode", fold_case=True),
            error_message_text=get_str(data, "errorMessage", fold_case=True),
            error_detail=get_str(data, "errorDetail", fold_case=True),
            reference_code=get_str(data, "referenceCode", fold_case=True),
        )

    def is_error(self) -> bool:
        return bool(
            self.error_code or self.error_message_text or self.reference_code or self.error_detail
        )

    def error_message(self) -> str:
        return "/".join(
            [self.error_code, self.error_message_text, self.reference_code, self.error_detail]
        )


@dataclass
class MultipleErrorInfo(ErrorEnvelope):
    """List of ErrorInfo under the "Error" key."""

    errors: list[ErrorInfo] = field(default_factory=list)

    FIELDS = ("Error",)

    @classmethod
    def from_json(cls, data: Any) -> "MultipleErrorInfo":
        data = as_dict(data, "MultipleErrorInfo")
        items = get_list(data, "Error", fold_case=True)
        return cls(errors=[ErrorInfo.from_json(item) for item in items])

    def is_error(self) -> bool:
        return any(error.is_error() for error in self.errors)

    def error_message(self) -> str:
        if not self.errors:
            return "No error"
        return "; ".join(self.error_messages())

    def error_messages(self) -> list[str]:
        return [error.error_message() for error in self.errors if error.is_error()]


@dataclass
class ErrorOccurredMessage(ErrorEnvelope):
    """Flag envelope: errorOccurred is the literal string "true" on failure."""

    error_occurred: str = ""
    exception_type: str = ""
    reference_code: str = ""
    message: str = ""

    FIELDS = ("errorOccurred", "exceptionType", "referenceCode", "message")

    @classmethod
    def from_json(cls, data: Any) -> "ErrorOccurredMessage":
        data = as_dict(data, "ErrorOccurredMessage")
        return cls(
            error_occurred=get_str(data, "errorOccurred", fold_case=True),
            exception_type=get_str(data, "exceptionType", fold_case=True),
            reference_code=get_str(data, "referenceCode", fold_case=True),
            message=get_str(data, "message", fold_case=True),
        )

    def is_error(self) -> bool:
        # Case-sensitive: "True" is not an error.
        return self.error_occurred == "true"

    def error_message(self) -> str:
        return "/".join(
            [self.error_occurred, self.exception_type, self.reference_code, self.message]
        )


# Order decides which mismatch surfaces first in strict mode.
ERROR_CANDIDATES: tuple[type[ErrorEnvelope], ...] = (
    ErrorInfo,
    MultipleErrorInfo,
    ErrorOccurredMessage,
)


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one response body."""

    is_error: bool
    message: str = ""
    envelope: ErrorEnvelope | None = None


def parse_body(body: str | bytes) -> Any:
    """Parse a raw response body as JSON."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        return json.loads(text)
    except ValueError as e:
        raise YodleeDecodeError(f"Invalid JSON in Yodlee response: {e}", body=text) from e


def classify(body: Any, strict: bool = False) -> Classification:
    """
    Decide whether a response body is a Yodlee error.

    Args:
        body: Raw JSON text/bytes, or an already parsed document
        strict: If True, every envelope is tried as-is and the first one
            the body cannot be decoded into raises YodleeDecodeError (legacy
            behaviour). Otherwise an envelope is skipped when the body
            carries none of its keys (e.g. a JSON array of accounts).

    Returns:
        Classification; is_error is False when no envelope flags an error

    Raises:
        YodleeDecodeError: If the body is not valid JSON, or carries an
            envelope's keys with values of the wrong type
    """
    data = parse_body(body) if isinstance(body, (str, bytes)) else body

    for candidate in ERROR_CANDIDATES:
        if not strict and not candidate.claims(data):
            logger.debug(f"Body carries no {candidate.__name__} keys")
            continue
        try:
            envelope = candidate.from_json(data)
        except YodleeDecodeError as e:
            logger.error(f"Malformed {candidate.__name__} in Yodlee response: {e}")
            raise

        if envelope.is_error():
            return Classification(True, envelope.error_message(), envelope)

    return Classification(False)


def raise_for_envelope(
    body: Any,
    status_code: int | None = None,
    strict: bool = False,
    prior_errors: list[str] | None = None,
) -> None:
    """
    Raise YodleeAPIError if the body is an error envelope.

    Args:
        body: Raw response body or parsed document
        status_code: HTTP status of the response, kept on the error
        strict: Passed through to classify()
        prior_errors: Failures already observed for this response (e.g. an
            HTTP error status); listed before the envelope's own failures
    """
    result = classify(body, strict=strict)
    if not result.is_error:
        return

    errors = list(prior_errors or [])
    errors.extend(result.envelope.error_messages())
    logger.error(f"Yodlee API error: {result.message}")
    raise YodleeAPIError(
        result.message,
        envelope=result.envelope,
        status_code=status_code,
        errors=errors,
    )
