# scripts/init_db.py

import sys

from customer_hub.db.engine import get_engine
from customer_hub.db.schema import metadata

def main(argv=None):
    """
    Create the customers table. Pass --reset to drop existing data first.
    """
    argv = sys.argv[1:] if argv is None else argv
    engine = get_engine()
    if "--reset" in argv:
        metadata.drop_all(engine)
    metadata.create_all(engine)
    print(f"DB schema ready at {engine.url}: {', '.join(metadata.tables)}")

if __name__ == "__main__":
    main()
