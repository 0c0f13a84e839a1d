# error.py
"""""
Error taxonomy of the calculator.

Every failure the pipeline can report is one of four MathError subclasses:

- BadTokenError          (Tokenizer)   character outside the supported set
- InvalidExpressionError (Tokenizer / Evaluator)   malformed number, empty input,
                                                   operand stack underflow / leftovers
- MismatchedParensError  (PostfixConverter)        unbalanced parentheses
- DivisionByZeroError    (Evaluator)   right operand of '/' is exactly zero

Each error carries a four digit code that indexes ERROR_MESSAGES.
"""""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class BadTokenError(MathError):
    """Raised by the tokenizer on the first unsupported character."""

    def __init__(self, char, code="3011", equation=None):
        super().__init__(f"Unexpected token: {char!r}", code=code, equation=equation)
        self.char = char


class InvalidExpressionError(MathError):
    pass


class MismatchedParensError(MathError):
    pass


class DivisionByZeroError(MathError):
    def __init__(self, message="Division by zero", code="3003", equation=None):
        super().__init__(message, code=code, equation=equation)


Error_Dictionary = {

    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3008" : "More than one '.' in one number.",
    "3009" : "Missing ')'. ",
    "3010" : "Missing '('. ",
    "3011" : "Unexpected Token: ", # + Token
    "3012" : "Invalid expression: ", # + Expression
    "3013" : "Missing digits after '.'.",
    "3027" : "Missing Number.",
    "3029" : "Empty expression.",
    "3030" : "Missing operator between numbers.",

    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting

    "5001" : "Configuration file could not be read.",

    "9999" : "Unexpected Error: " #+error
}
