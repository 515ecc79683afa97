"""Seed the store with sample transactions for development.

Usage:
    python -m realty_core.db.seed

Creates a "demo" user (password "DemoPass123") if missing and a handful of
fully populated listings, including the address and financial fields the
API stores but never serializes.
"""

from datetime import date, timedelta

from ..auth import service
from ..auth.schemas import UserCreate
from ..config import settings
from ..schemas import TransactionRecord
from ..utils import isodatetime
from . import DocumentStore

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "DemoPass123"


def sample_transactions(today: date) -> list[dict]:
    return [
        {
            "name": "123 Main St Listing",
            "type": "sale",
            "status": "active",
            "description": "Three bedroom colonial near the park",
            "list_price": 425000.0,
            "list_date": today - timedelta(days=10),
            "expiration_date": today + timedelta(days=170),
            "mls_number": "MLS-100234",
            "address_line1": "123 Main St",
            "city": "Springfield",
            "county": "Sangamon",
            "state": "IL",
            "zip": "62701",
            "tax_id": "14-27-301-004",
            "property_type": "single-family",
        },
        {
            "name": "48 Harbor View Purchase",
            "type": "purchase",
            "status": "pending",
            "purchase_price": 612500.0,
            "effective_date": today - timedelta(days=3),
            "closing_date": today + timedelta(days=27),
            "comments": "Inspection scheduled",
            "address_line1": "48 Harbor View Rd",
            "address_line2": "Unit 2",
            "city": "Portland",
            "county": "Cumberland",
            "state": "ME",
            "zip": "04101",
            "property_type": "condo",
        },
        {
            "name": "Oak Ridge Lease",
            "type": "lease",
            "status": "closed",
            "list_price": 2100.0,
            "list_date": today - timedelta(days=60),
            "closing_date": today - timedelta(days=30),
            "address_line1": "9 Oak Ridge Ct",
            "city": "Austin",
            "state": "TX",
            "zip": "73301",
            "property_type": "townhouse",
        },
    ]


def seed_transactions(store: DocumentStore) -> int:
    """Insert sample transactions owned by the demo user.

    Returns:
        Number of transactions created
    """
    user = service.get_user_by_username(store, DEMO_USERNAME)
    if user is None:
        user = service.create_user(
            store, UserCreate(username=DEMO_USERNAME, password=DEMO_PASSWORD)
        )
        print(f"✅ Created user '{DEMO_USERNAME}'")

    now = isodatetime.now()
    count = 0
    for fields in sample_transactions(date.today()):
        dates = {
            key: isodatetime.coerce(value)
            for key, value in fields.items()
            if isinstance(value, date)
        }
        record = TransactionRecord(
            **{**fields, **dates},
            user={"kind": "reference", "id": user.id},
            create_date=now,
        )
        store.transactions.create(record.to_document())
        count += 1

    return count


def main():
    store = DocumentStore(settings.database_path)
    store.init_db()
    count = seed_transactions(store)
    print(f"✅ Seeded {count} transactions into {settings.database_path}")


if __name__ == "__main__":
    main()
