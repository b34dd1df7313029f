"""Token source with lookahead over the lexer."""

from collections import deque

from toonpy.lexer import Lexer, Token, TokenKind


class TokenSource:
    """Bridge between lexer and parser that buffers tokens for lookahead."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._lookahead: deque[Token] = deque()
        self._current = lexer.next_token()

    @property
    def current(self) -> Token:
        return self._current

    def nth(self, n: int) -> Token:
        """Token `n` positions ahead of the current one (0 is current)."""
        if n == 0:
            return self._current
        while len(self._lookahead) < n:
            if self._lookahead and self._lookahead[-1].kind == TokenKind.EOF:
                return self._lookahead[-1]
            self._lookahead.append(self._lexer.next_token())
        return self._lookahead[n - 1]

    def bump(self) -> None:
        if self._current.kind == TokenKind.EOF:
            return
        if self._lookahead:
            self._current = self._lookahead.popleft()
        else:
            self._current = self._lexer.next_token()
