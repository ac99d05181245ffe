# load_data.py
"""
Load the sample wiki pages and categories from data/ into the database.

    python scripts/init_db.py   # once, to create the schema
    python load_data.py
"""

from scripts.ingest import (
    CATEGORIES_PATH,
    PAGES_PATH,
    load_into_db,
    parse_categories_csv,
    parse_pages_csv,
)


def main():
    pages_list, page_stats = parse_pages_csv(PAGES_PATH)
    categories_list, category_stats = parse_categories_csv(CATEGORIES_PATH)
    load_into_db(pages_list, categories_list)

    print("Load complete.")
    print(f"Pages loaded:          {page_stats['n_records']}")
    print(f"Categories loaded:     {category_stats['n_records']}")
    print(f"Rows with errors:      {page_stats['n_errors'] + category_stats['n_errors']}")


if __name__ == "__main__":
    main()
