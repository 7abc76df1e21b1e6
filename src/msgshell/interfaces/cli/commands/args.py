import shlex
from typing import Any, Dict, List, Tuple

from msgshell.core.exceptions import CommandError

END_OF_OPTIONS = '--'


def tokenize(argstr: str) -> List[Tuple[str, bool]]:
    """
    Split an argument string with shell quoting rules.

    Returns (token, quoted) pairs; quoted is True when the token's source
    text began with a quote or an escape, e.g. '"--loud"' or '\\--loud'.

    Raises:
        CommandError: If the string has unbalanced quotes.
    """
    lexer = shlex.shlex(argstr, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ''
    tokens = []
    try:
        while True:
            start = lexer.instream.tell()
            token = lexer.get_token()
            if token is None:
                break
            raw = argstr[start:lexer.instream.tell()].lstrip()
            tokens.append((token, raw[:1] in lexer.quotes + lexer.escape))
    except ValueError as e:
        raise CommandError(f"Could not parse arguments: {e}") from e
    return tokens


def parse_args(argstr: str) -> Dict[str, Any]:
    """
    Split a command argument string into positional args and --options.

    '--key=value' sets options[key] to the string after '=' and a bare
    '--flag' sets options[flag] to True. A quoted token is always
    positional, and so is every token after a bare '--'.
    """
    args = []
    options = {}
    options_ended = False
    for token, quoted in tokenize(argstr):
        if options_ended or quoted or not token.startswith('--'):
            args.append(token)
        elif token == END_OF_OPTIONS:
            options_ended = True
        else:
            key, sep, value = token[2:].partition('=')
            options[key] = value if sep else True
    return {'args': args, 'options': options}
