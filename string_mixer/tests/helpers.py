def fixed_salt(salt: str):
    """Salt source that always hands back the same characters."""
    def source(length: int) -> str:
        return (salt * (length // max(len(salt), 1) + 1))[:length]
    return source


class ScriptedStream:
    """Stand-in for Mulberry32 that replays a fixed list of draws."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.draws = 0

    def random(self) -> float:
        value = self._draws[self.draws % len(self._draws)]
        self.draws += 1
        return value
