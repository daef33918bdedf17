"""
Input Validators

Decoding and validation helpers for user input. Failures are reported
with the exceptions from shortener.core.exceptions so that the endpoint
layer stays free of parsing details.
"""

import json
from typing import Any

from pydantic import ValidationError

from shortener.api.schemas import ShortenRequest
from shortener.core.exceptions import InvalidRequestBodyError, URLRequiredError

_decoder = json.JSONDecoder()


def decode_first_value(body: bytes) -> Any:
    """
    Decode the first JSON value in body. Anything after it is not read.

    Raises:
        InvalidRequestBodyError: Body is empty or does not start with valid JSON
    """
    try:
        text = body.decode("utf-8").lstrip()
        value, _ = _decoder.raw_decode(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidRequestBodyError() from e
    return value


def parse_shorten_request(body: bytes) -> ShortenRequest:
    """
    Decode a /shorten request body.

    Args:
        body: Raw request body

    Returns:
        ShortenRequest with a non-empty url

    Raises:
        InvalidRequestBodyError: Body is not a JSON object with a string url
        URLRequiredError: url is missing, null or empty
    """
    document = decode_first_value(body)
    if document is None:
        raise URLRequiredError()

    try:
        request = ShortenRequest.model_validate(document)
    except ValidationError as e:
        raise InvalidRequestBodyError() from e

    if not request.url:
        raise URLRequiredError()

    return request
