"""Ingredient domain entity: name, amount, unit, expiration date, unit price."""
from datetime import date, datetime
from cookbook.utilities.constants import DATE_FORMAT, CURRENCY
from typing import Optional


class Ingredient:
    def __init__(self, name: str = "", amount: float = 0.0, unit: str = "",
                 expire_date: Optional[date] = None, unit_price: float = 0.0):
        self.name = name
        self.amount = amount
        self.unit = unit
        self.expire_date = expire_date
        self.unit_price = unit_price

    def matches(self, name: str) -> bool:
        '''Ingredients are the same ingredient when their names match, ignoring case.'''
        return isinstance(name, str) and self.name.lower() == name.lower()

    def set_amount(self, delta: float):
        '''Adjusts the amount by the specified delta (can be negative).'''
        self.amount += delta

    def value(self) -> float:
        return self.amount * self.unit_price

    def is_expired(self, as_of: date) -> bool:
        return self.expire_date is not None and self.expire_date < as_of

    def sort_key(self):
        '''Name (case-insensitive) first, then expiration date.'''
        return (self.name.lower(), self.expire_date or date.max)

    def __str__(self) -> str:
        exp = self.expire_date.strftime(DATE_FORMAT) if self.expire_date else "-"
        return (f"Ingredient: {self.name} {self.amount} {self.unit}"
                f" | Expire date: {exp}"
                f" | Price: {self.unit_price} {CURRENCY}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        exp = d.get("expire_date")
        if isinstance(exp, datetime):
            d["expire_date"] = exp.date()
        elif exp and not isinstance(exp, date):
            d["expire_date"] = datetime.strptime(exp, DATE_FORMAT).date()
        elif not exp:
            d["expire_date"] = None
        allowed = {"name", "amount", "unit", "expire_date", "unit_price"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        return Ingredient(**filtered)

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary.'''
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "expire_date": self.expire_date.strftime(DATE_FORMAT) if self.expire_date else None,
            "unit_price": self.unit_price,
        }
