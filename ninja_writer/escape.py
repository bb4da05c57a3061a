"""Escaping helpers for paths and values embedded in .ninja files."""


def escape_path(word):
    """Escape a path token: '$' is doubled, space and ':' get a '$' prefix."""
    return word.replace('$', '$$').replace(' ', '$ ').replace(':', '$:')


def escape(string):
    """Escape a string such that it can be embedded into a Ninja file without
    further interpretation."""
    if '\n' in string:
        raise ValueError('Ninja syntax does not allow newlines: %r' % string)
    # We only have one special metacharacter: '$'.
    return string.replace('$', '$$')


def as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)
