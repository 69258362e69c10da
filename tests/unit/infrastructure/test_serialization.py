"""DynamoDB JSON Encoding Unit Tests"""
import json
from decimal import Decimal

import pytest

from src.infrastructure.serialization import dumps


class TestDumps:
    def test_integral_decimal_becomes_int(self):
        assert json.loads(dumps({"movieId": Decimal("42")})) == {"movieId": 42}
        assert dumps(Decimal("42")) == "42"

    def test_fractional_decimal_becomes_float(self):
        assert json.loads(dumps({"rating": Decimal("7.5")})) == {"rating": 7.5}

    def test_sets_become_sorted_lists(self):
        assert json.loads(dumps({"names": {"b", "a"}})) == {"names": ["a", "b"]}

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError):
            dumps({"value": object()})
