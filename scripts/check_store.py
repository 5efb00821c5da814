"""Quick script to inspect the JSON record store."""

from src.config.settings import settings
from src.storage.record_store import RecordStore


def main():
    store = RecordStore.from_file(settings.RECORDS_PATH)

    names = store.names()
    print(f"\n📋 Collections in '{settings.RECORDS_PATH}': {names}\n")

    # Check served collection
    records = store.collection(settings.RECORDS_COLLECTION)
    print(f"📄 {settings.RECORDS_COLLECTION} count: {len(records)}")

    if records:
        print(f"\n{'─'*100}")
        print(f"{'id':<10} {'title':<50} {'foundAt':<26} {'tags'}")
        print(f"{'─'*100}")
        for r in records[:10]:
            title = str(r.get("title", ""))
            title = (title[:47] + "...") if len(title) > 50 else title
            found_at = str(r.get("foundAt") or "N/A")
            tags = str(r.get("tags") or "N/A")[:30]
            print(f"{str(r.get('id', '?')):<10} {title:<50} {found_at:<26} {tags}")
        print()

    # Check other collections
    for name in names:
        if name != settings.RECORDS_COLLECTION:
            print(f"  {name}: {len(store.collection(name))} records")


if __name__ == "__main__":
    main()
