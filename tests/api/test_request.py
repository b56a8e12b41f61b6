"""Tests for request decoding and pagination helpers."""

from typing import Optional

import pytest
from pydantic import BaseModel, EmailStr, Field

from api.request import decode_body, format_validation_errors, parse_id, parse_pagination
from shared.exceptions import BadRequestError, ValidationError


class _Signup(BaseModel):
    name: str = Field(..., min_length=3, max_length=10)
    email: EmailStr
    age: Optional[int] = Field(default=None, ge=18, le=120)
    price: Optional[float] = Field(default=None, gt=0, lt=1000)


class TestDecodeBody:
    def test_valid_body(self):
        result = decode_body(b'{"name": "Alice", "email": "alice@example.com"}', _Signup)
        assert result.name == "Alice"

    @pytest.mark.parametrize("raw", [b"", b"   ", b"\n"])
    def test_empty_body(self, raw):
        with pytest.raises(BadRequestError, match="Request body cannot be empty"):
            decode_body(raw, _Signup)

    @pytest.mark.parametrize("raw", [b"{not json", b'{"name": ', b"[1, 2]", b'"text"', b"42"])
    def test_malformed_body(self, raw):
        with pytest.raises(BadRequestError, match="Invalid JSON format"):
            decode_body(raw, _Signup)

    def test_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            decode_body(b'{"name": "Alice"}', _Signup)
        assert exc_info.value.message == "Validation failed"
        assert exc_info.value.details == ["Field email is required"]

    def test_reports_every_field(self):
        with pytest.raises(ValidationError) as exc_info:
            decode_body(b'{"name": "Al", "email": "nope", "age": 5}', _Signup)
        assert exc_info.value.details == [
            "Field name must be at least 3 characters",
            "Field email must be a valid email address",
            "Field age must be greater than or equal to 18",
        ]


class TestFormatValidationErrors:
    @pytest.mark.parametrize(
        "error,expected",
        [
            ({"type": "missing", "loc": ("body", "sku"), "msg": ""}, "Field sku is required"),
            (
                {"type": "string_too_long", "loc": ("name",), "msg": "", "ctx": {"max_length": 10}},
                "Field name must be at most 10 characters",
            ),
            (
                {"type": "greater_than", "loc": ("price",), "msg": "", "ctx": {"gt": 0}},
                "Field price must be greater than 0",
            ),
            (
                {"type": "less_than", "loc": ("price",), "msg": "", "ctx": {"lt": 1000}},
                "Field price must be less than 1000",
            ),
            (
                {"type": "less_than_equal", "loc": ("age",), "msg": "", "ctx": {"le": 120}},
                "Field age must be less than or equal to 120",
            ),
            (
                {"type": "int_parsing", "loc": ("shipping_address", "zip"), "msg": "Input should be a valid integer"},
                "Field shipping_address.zip is invalid: Input should be a valid integer",
            ),
        ],
    )
    def test_messages(self, error, expected):
        assert format_validation_errors([error]) == [expected]


class TestParsePagination:
    @pytest.mark.parametrize(
        "page,page_size,expected",
        [
            (None, None, (1, 10)),
            ("2", "25", (2, 25)),
            ("0", "10", (1, 10)),
            ("-3", "10", (1, 10)),
            ("abc", "10", (1, 10)),
            ("1", "0", (1, 10)),
            ("1", "101", (1, 10)),
            ("1", "100", (1, 100)),
            ("1", "xyz", (1, 10)),
            ("1_0", " 5 ", (1, 10)),
            ("+3", "+20", (1, 10)),
            (" 2", "20 ", (1, 10)),
            ("\u0663", "\u0665", (1, 10)),
            ("2.0", "1e1", (1, 10)),
            ("", "", (1, 10)),
        ],
    )
    def test_fallback_policy(self, page, page_size, expected):
        pagination = parse_pagination(page, page_size)
        assert (pagination.page, pagination.page_size) == expected


class TestParseId:
    def test_valid_uuid(self):
        assert parse_id("0B7C2F64-3C4E-4A8B-9D0E-1F2A3B4C5D6E", "order") == "0b7c2f64-3c4e-4a8b-9d0e-1f2a3b4c5d6e"

    def test_invalid_uuid(self):
        with pytest.raises(BadRequestError, match="Invalid order ID"):
            parse_id("order-1", "order")
