# load_data.py
"""
Import the sample customers into the database from the command line.
Equivalent to pressing "Import Customers" on the list page.
"""

from scripts.ingest import run_import


def main():
    result = run_import()

    print("Load complete.")
    print(f"Customers imported:    {result.imported}")
    print(f"Customers skipped:     {result.skipped}")


if __name__ == "__main__":
    main()
