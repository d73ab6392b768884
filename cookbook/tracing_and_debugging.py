import logging

from pathquery import Query, QueryConfig
from pathquery.core.eval import validate_queries


def main():
    logging.basicConfig(level=logging.DEBUG)
    logger = logging.getLogger("cookbook")

    record = {
        "user": {"id": 123, "first": "Ada", "score": 950},
        "items": [
            {"name": "Widget A", "price": 3.5},
            {"name": "Widget B", "price": 4.0},
        ],
    }

    # step-by-step view of one query
    print(Query("items.1.name", record).trace())

    # the same steps as DEBUG records
    config = QueryConfig(trace_enabled=True, logger=logger)
    Query("user.score", record, config=config).result()

    placeholders = {
        "first": "user.first",
        "second_item": "items.1.name",
        "broken": 'items.find("x',
    }
    print(validate_queries(placeholders))


if __name__ == "__main__":
    main()
