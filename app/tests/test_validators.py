"""Tests du filtrage des jetons push"""

import pytest

from app.utils.validators import clean_tokens, is_valid_push_token


@pytest.mark.parametrize("token", [None, "", "   ", "null", "undefined"])
def test_invalid_tokens(token):
    assert is_valid_push_token(token) is False


def test_valid_token():
    assert is_valid_push_token("dK3x:APA91bF") is True


def test_clean_tokens_keeps_order():
    assert clean_tokens(["a", "null", None, "b", "undefined", ""]) == ["a", "b"]
