from datetime import date

from pathquery import MethodTable, evaluate
from pathquery.core.registry import AdapterRegistry


def main():
    registry = AdapterRegistry()

    # strings become dispatchable only through this registry
    registry.register(str, lambda s: MethodTable({
        "upper": s.upper,
        "short": lambda n=3.0: s[:int(n)],
    }))
    registry.register(date, lambda d: MethodTable({
        "format": lambda fmt: d.strftime(fmt),
        "year": lambda: d.year,
    }))

    record = {
        "user": {"first": "ada", "born": date(1815, 12, 10)},
        "config": MethodTable({}, fallback=lambda name, *args: f"<{name}:{len(args)}>"),
    }

    print(evaluate("user.first.upper()", record, registry=registry))
    print(evaluate("user.first.short(2)", record, registry=registry))
    print(evaluate('user.born.format("%d.%m.%Y")', record, registry=registry))
    print(evaluate("config.anything(1, 2)", record, registry=registry))


if __name__ == "__main__":
    main()
