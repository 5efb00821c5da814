"""Run a search against the configured record store from the command line."""

import argparse
import json
import logging

from src.config.settings import settings
from src.models.api_models import SearchRequest
from src.search.pipeline import SearchPipeline
from src.storage.record_store import RecordStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--query", help="substring searched in title/description/tags")
    parser.add_argument("--filters", default="{}", help='JSON object, e.g. \'{"price": {"lt": 20}}\'')
    parser.add_argument("--sort-by", help="field to sort by (default foundAt)")
    parser.add_argument("--order", choices=["asc", "desc"])
    parser.add_argument("--limit", type=int)
    args = parser.parse_args()

    request = SearchRequest(
        query=args.query,
        filters=json.loads(args.filters),
        sort_by=args.sort_by,
        order=args.order,
        limit=args.limit,
    )

    store = RecordStore.from_file(settings.RECORDS_PATH)
    result = SearchPipeline().run(store.collection(settings.RECORDS_COLLECTION), request)
    print(json.dumps({"count": result.count, "items": result.items}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
