"""Lex an INI file with a four-state machine, zero deps."""

from luthor import Category, StateFunction, Tokenizer, lex


@StateFunction
def line_state(tokenizer: Tokenizer) -> StateFunction | None:
    char = tokenizer.current_char()
    if char is None:
        return None
    if char.isspace():
        tokenizer.consume_whitespace()
        return line_state
    if char in ";#":
        return comment_state
    if char == "[":
        tokenizer.tokenize_next(1, Category.BRACKET)
        return section_state
    return key_state


@StateFunction
def comment_state(tokenizer: Tokenizer) -> StateFunction:
    while tokenizer.has_more_data() and tokenizer.current_char() != "\n":
        tokenizer.advance()
    tokenizer.tokenize(Category.COMMENT)
    return line_state


@StateFunction
def section_state(tokenizer: Tokenizer) -> StateFunction:
    while tokenizer.has_more_data() and tokenizer.current_char() not in "]\n":
        tokenizer.advance()
    tokenizer.tokenize(Category.IDENTIFIER)
    if tokenizer.current_char() == "]":
        tokenizer.tokenize_next(1, Category.BRACKET)
    return line_state


@StateFunction
def key_state(tokenizer: Tokenizer) -> StateFunction:
    while tokenizer.has_more_data() and tokenizer.current_char() not in "=\n":
        tokenizer.advance()
    tokenizer.tokenize(Category.KEY)
    if tokenizer.current_char() == "=":
        tokenizer.tokenize_next(1, Category.OPERATOR)
        while tokenizer.has_more_data() and tokenizer.current_char() != "\n":
            tokenizer.advance()
        tokenizer.tokenize(Category.STRING)
    return line_state


source = "; settings\n[server]\nhost=localhost\nport=8080\n"
for token in lex(source, line_state):
    print(token)
