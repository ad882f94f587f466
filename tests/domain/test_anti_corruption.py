from typing import Dict, List

import pytest

from shared_kernel.domain.base import AntiCorruptionAdapter, AntiCorruptionTranslator
from tests.domain.sample_domain import Customer


class LegacyCustomerTranslator(AntiCorruptionTranslator[dict, Customer]):
    def translate(self, source: dict) -> Customer:
        return Customer(id=int(source["CUST_NO"]), name=source["CUST_NAME"].strip().title())


class LegacyCustomerAdapter(AntiCorruptionAdapter[dict, Customer, int]):
    """Adapter over an in-memory stand-in for a legacy customer table."""

    def __init__(self, translator: LegacyCustomerTranslator):
        self.rows: Dict[int, dict] = {}
        self.translator = translator

    def get(self, key: int) -> Customer:
        return self.translator.translate(self.rows[key])

    def get_all(self) -> List[Customer]:
        return self.translator.translate_all(list(self.rows.values()))

    def add(self, entity: dict) -> Customer:
        self.rows[int(entity["CUST_NO"])] = entity
        return self.translator.translate(entity)

    def update(self, key: int, entity: dict) -> None:
        self.rows[key] = entity

    def delete(self, key: int) -> None:
        del self.rows[key]


@pytest.fixture
def adapter():
    return LegacyCustomerAdapter(LegacyCustomerTranslator())


def test_translator_maps_foreign_record():
    customer = LegacyCustomerTranslator().translate({"CUST_NO": "42", "CUST_NAME": " ACME LTD "})

    assert customer == Customer(id=42)
    assert customer.name == "Acme Ltd"


def test_adapter_returns_local_entities(adapter):
    added = adapter.add({"CUST_NO": "1", "CUST_NAME": "ALICE"})
    adapter.add({"CUST_NO": "2", "CUST_NAME": "BOB"})

    adapter.update(2, {"CUST_NO": "2", "CUST_NAME": "ROBERT"})
    adapter.delete(1)

    assert added.name == "Alice"
    assert [c.name for c in adapter.get_all()] == ["Robert"]
    assert adapter.get(2) == Customer(id=2)


def test_ports_are_abstract():
    with pytest.raises(TypeError):
        AntiCorruptionTranslator()
    with pytest.raises(TypeError):
        AntiCorruptionAdapter()
