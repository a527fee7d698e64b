"""Decoders for the carrier response envelope.

Every response is ``{errorCode, message, title, debug, result}``. A
non-zero ``errorCode`` decodes to :class:`CarrierError`; otherwise each
operation inspects ``result`` and returns a typed value or a
:class:`DecodeError`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from gopeople_client.exceptions import CarrierError, DecodeError
from gopeople_client.models import JobInfo, JobStatus, QuoteInfo, ShiftInfo
from gopeople_client.result import Err, Ok, Result, traverse

logger = logging.getLogger(__name__)

_MISSING = object()


def _envelope(payload: Any) -> dict[str, Any]:
    return payload if isinstance(payload, dict) else {}


def carrier_error(payload: Any) -> CarrierError | None:
    """Return the carrier error reported by ``payload``, if any."""
    envelope = _envelope(payload)
    if "errorCode" not in envelope:
        return None
    code = envelope["errorCode"]
    # False compares equal to 0 but is not a success code.
    if code == 0 and code is not False:
        return None

    message = envelope.get("message")
    if message is None:
        message = "Unhandled exception"
    result_json = json.dumps(
        envelope.get("result", {}), separators=(",", ":"), ensure_ascii=False
    )
    error = CarrierError(code, message, result_json)
    logger.warning("Carrier rejected request: %s", error)
    return error


def _result(payload: Any) -> Any:
    return _envelope(payload).get("result", _MISSING)


def decode_job_info(payload: Any) -> Result[JobInfo]:
    """Decode an instant booking or a booking made against a quote."""
    if error := carrier_error(payload):
        return Err(error)
    result = _result(payload)
    if result is _MISSING:
        return Err(DecodeError("No GoSHIFT result"))
    if (
        not isinstance(result, dict)
        or "jobId" not in result
        or "trackingCode" not in result
    ):
        return Err(DecodeError("No job ID nor tracking code"))
    try:
        return Ok(JobInfo(id=result["jobId"], code=result["trackingCode"]))
    except PydanticValidationError as exc:
        return Err(DecodeError(f"Malformed job info: {exc}"))


def _shift_info(item: Any) -> Result[ShiftInfo]:
    if (
        not isinstance(item, dict)
        or "guid" not in item
        or "dateTime" not in item
    ):
        return Err(DecodeError("No GUID or DateTime returned"))
    try:
        return Ok(ShiftInfo(id=item["guid"], time=item["dateTime"]))
    except PydanticValidationError as exc:
        return Err(DecodeError(f"Malformed shift: {exc}"))


def decode_shift_infos(payload: Any) -> Result[list[ShiftInfo]]:
    if error := carrier_error(payload):
        return Err(error)
    result = _result(payload)
    if not isinstance(result, list):
        return Err(DecodeError("[Malformation] should be an object array"))
    return traverse(result, _shift_info)


def decode_cancelled_job(payload: Any) -> Result[str]:
    """Decode a cancellation into the cancelled job ID."""
    if error := carrier_error(payload):
        return Err(error)
    result = _result(payload)
    if result is _MISSING:
        return Err(DecodeError("No cancel job result"))
    if not isinstance(result, dict) or "jobId" not in result:
        return Err(DecodeError("No cancelled job ID returned"))
    return Ok(result["jobId"])


def decode_job_statuses(payload: Any) -> Result[list[JobStatus]]:
    if error := carrier_error(payload):
        return Err(error)
    result = _result(payload)
    if result is _MISSING:
        return Err(DecodeError("No job status result"))
    if not isinstance(result, list):
        return Err(DecodeError("No job ID nor tracking code"))
    try:
        return Ok([JobStatus.model_validate(item) for item in result])
    except PydanticValidationError as exc:
        return Err(DecodeError(f"Malformed job status: {exc}"))


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def decode_quote_info(payload: Any) -> Result[QuoteInfo]:
    """Decode a quote into a GoNOW or a GoSAMEDAY price list.

    The on-demand list wins when both are present; the response, not the
    requested kind, decides which list is used.
    """
    if error := carrier_error(payload):
        return Err(error)
    result = _result(payload)
    if result is _MISSING:
        return Err(DecodeError("No GoSHIFT result"))
    if (
        not isinstance(result, dict)
        or "distance" not in result
        or "expiredAt" not in result
    ):
        return Err(DecodeError("No distance or expiry"))

    data: dict[str, Any] = {
        "distance": result["distance"],
        "expiredAt": result["expiredAt"],
    }
    if _non_empty_list(result.get("onDemandPriceList")):
        data["goNowQuotes"] = result["onDemandPriceList"]
    elif _non_empty_list(result.get("setRunPriceList")):
        data["goSameDayQuotes"] = result["setRunPriceList"]
    else:
        return Err(DecodeError("No price list returned"))

    try:
        return Ok(QuoteInfo.model_validate(data))
    except PydanticValidationError as exc:
        return Err(DecodeError(f"Malformed quote: {exc}"))
