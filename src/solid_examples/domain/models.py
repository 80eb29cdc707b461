"""
Domain models shared by the SOLID demonstrations.

Data-carrying models use Pydantic v2 BaseModel, so they get validation and
a readable repr for free. The shapes and workers live in their own modules
because their behaviour (not their data) is what the demos are about.

Enums inherit from (str, Enum) so they compare equal to their plain string
values (e.g. Principle.OCP == "ocp"), which keeps the CLI parsing trivial.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class Principle(str, Enum):
    """The five SOLID principles, in the order the runner demonstrates them."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @property
    def display_name(self) -> str:
        return _TITLES[self]

    @property
    def takeaway(self) -> str:
        return _TAKEAWAYS[self]


_TITLES = {
    Principle.SRP: "Single Responsibility Principle",
    Principle.OCP: "Open/Closed Principle",
    Principle.LSP: "Liskov Substitution Principle",
    Principle.ISP: "Interface Segregation Principle",
    Principle.DIP: "Dependency Inversion Principle",
}

_TAKEAWAYS = {
    Principle.SRP: "Each class has one reason to change",
    Principle.OCP: "Open for extension, closed for modification",
    Principle.LSP: "Subtypes are substitutable for base types",
    Principle.ISP: "Clients depend only on interfaces they use",
    Principle.DIP: "Depend on abstractions, not concretions",
}


# ── SRP ─────────────────────────────────────────────────────────────


class User(BaseModel):
    """A user to be registered.

    Deliberately accepts blank fields: deciding whether a user is valid is
    UserValidator's job, not the model's.
    """

    name: str = ""
    email: str = ""


# ── DIP ─────────────────────────────────────────────────────────────


class Order(BaseModel):
    """An order handed to the order processors."""

    id: int = Field(..., ge=0)
    customer_email: str = ""


# ── OCP ─────────────────────────────────────────────────────────────


class DiscountQuote(BaseModel):
    """Explicit outcome of a registry lookup.

    `matched` is False when no strategy is registered for the category, which
    tells "unknown category" apart from a strategy that legitimately yields
    a zero discount.
    """

    category: str
    amount: Decimal = Field(..., allow_inf_nan=True)
    discount: Decimal = Field(..., allow_inf_nan=True)
    matched: bool
