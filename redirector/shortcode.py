"""Short code generation utilities."""


class ShortCodeGenerator:
    """Generate sequential short codes for URLs.

    Codes are plain decimal strings: the first code handed out for an empty
    table is "1", the next "2", and so on.
    """

    def generate_sequential(self, current_size: int) -> str:
        """Generate the code that follows a table of the given size.

        Args:
            current_size: Number of entries currently stored

        Returns:
            Decimal short code
        """
        if current_size < 0:
            raise ValueError(f"Table size cannot be negative: {current_size}")
        return str(current_size + 1)
