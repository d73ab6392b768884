from pathquery import MethodTable, evaluate


class Page:
    def __init__(self, slug, title, children=()):
        self.slug = slug
        self._title = title
        self._children = list(children)

    def title(self):
        return self._title

    def find(self, slug):
        for child in self._children:
            if child.slug == slug:
                return child
        return None


record = {
    "user": {
        "id": 123, "first": "Ada", "last": "Lovelace",
        "emails": [
            {"type": "work", "value": "ada@company.com"},
            {"type": "personal", "value": "ada@example.com"}
        ]
    },
    "site": Page("home", "Home", [Page("about", "About us"), Page("blog", "Journal")]),
    "greeter": MethodTable({"greet": lambda name, punct="!": f"Hi {name}{punct}"}),
    "section": "blog",
}

print(evaluate("user.first", record))
print(evaluate("user.emails.1.value", record))
print(evaluate('site.find("about").title()', record))
print(evaluate("site.find(section).title()", record))
print(evaluate("greeter.greet(user.first, '?')", record))
