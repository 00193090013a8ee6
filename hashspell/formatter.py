"""Token formatting: trims punctuation from the edges of a raw input word."""


def format_token(token: str) -> str:
    """Strip one leading non-alphanumeric character and any trailing non-letters.

    A token never shrinks below one character, so pure punctuation such as
    ``"..."`` comes back as ``"."`` and is later reported as misspelled.
    Trailing digits are stripped too: ``"page2"`` becomes ``"page"``.
    """
    start = 0
    end = len(token)
    if end > 1 and not token[0].isalnum():
        start = 1
    while end - start > 1 and not token[end - 1].isalpha():
        end -= 1
    return token[start:end]
