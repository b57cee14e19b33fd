import io

from megaladon.errors import ErrorReporter, MegaladonError, ParseError, format_message
from megaladon.tokens import Token, TokenType


def test_format_message_names_the_lexeme():
    token = Token(TokenType.IDENTIFIER, "foo", None, 3)
    text = format_message(token, "Bad thing.")
    assert text == "[line 3] Error at 'foo': Bad thing."


def test_format_message_at_end_of_file():
    token = Token(TokenType.EOF, "", None, 9)
    text = format_message(token, "Expect expression.")
    assert text.startswith("[line 9] Error at end")
    assert text.endswith(": Expect expression.")


def test_format_message_without_lexeme():
    token = Token(TokenType.STRING, "", None, 2)
    assert " at " not in format_message(token, "oops")


def test_error_with_token_is_formatted():
    token = Token(TokenType.MINUS, "-", None, 4)
    error = MegaladonError("Operand must be a number.", token)
    assert str(error) == format_message(token, "Operand must be a number.")
    assert error.message == "Operand must be a number."
    assert error.token is token


def test_general_error_keeps_plain_message():
    error = MegaladonError("len() expects 1 argument.")
    assert str(error) == "len() expects 1 argument."
    assert error.token.type is TokenType.EOF
    assert error.token.line == 0


def test_parse_error_carries_token():
    token = Token(TokenType.SEMICOLON, ";", None, 1)
    error = ParseError(token, "Expect expression.")
    assert str(error) == "Expect expression."
    assert error.token is token


def test_reporter_report_writes_line_and_sets_flag():
    stream = io.StringIO()
    reporter = ErrorReporter(stream)
    reporter.report(5, "", "Unexpected character.")
    assert stream.getvalue() == "[line 5] Error: Unexpected character.\n"
    assert reporter.had_error


def test_reporter_report_token_uses_format():
    stream = io.StringIO()
    reporter = ErrorReporter(stream)
    token = Token(TokenType.IDENTIFIER, "x", None, 2)
    reporter.report_token(token, "msg")
    assert stream.getvalue() == format_message(token, "msg") + "\n"
    assert reporter.had_error


def test_reporter_reset_clears_flags():
    reporter = ErrorReporter(io.StringIO())
    reporter.report(1, "", "x")
    reporter.had_runtime_error = True
    reporter.reset()
    assert not reporter.had_error
    assert not reporter.had_runtime_error


def test_reporter_defaults_to_stderr(capsys):
    reporter = ErrorReporter()
    reporter.report(1, " at 'y'", "problem")
    assert capsys.readouterr().err == "[line 1] Error at 'y': problem\n"