class CaseConverter:
    @staticmethod
    def camel_to_snake(name: str) -> str:
        return "".join([f"_{c.lower()}" if c.isupper() else c for c in name]).lstrip(
            "_"
        )

    @staticmethod
    def snake_to_camel(name: str) -> str:
        first, *rest = name.split("_")
        return first + "".join(part[:1].upper() + part[1:] for part in rest)
