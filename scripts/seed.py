from cashcard.db.init_db import DEMO_CASHCARDS, init_db, seed_demo_cashcards
from cashcard.db.session import SessionLocal

# Usage:
#   python -m scripts.seed
#
# Creates the tables and the demo cash cards (sarah1: 99, 100, 101; kumar2: 102).
# Does nothing when the table already has cards.


def main():
    init_db()
    db = SessionLocal()
    try:
        added = seed_demo_cashcards(db)
    finally:
        db.close()
    print("Seeded.")
    print("Cards added:", added)
    for card_id, amount, owner in DEMO_CASHCARDS:
        print(f"  {card_id}: {amount} ({owner})")


if __name__ == "__main__":
    main()
