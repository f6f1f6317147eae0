"""Shared constants for i18nassets.

Centralizes the values used across the syntax, runtime and localization
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Bundle naming: Grails-style message bundle file conventions
- Input limits: Size bounds for bundle files read from disk
- Output format: Indentation and the JavaScript runtime wrapper

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bundle naming
    "DEFAULT_ASSET_EXTENSION",
    "DEFAULT_BUNDLE_BASENAME",
    "DEFAULT_BUNDLE_DIR",
    "DEFAULT_BUNDLE_EXTENSION",
    "DEFAULT_ENCODING",
    # Input limits
    "MAX_BUNDLE_SIZE",
    # Output format
    "TABLE_INDENT",
    "TABLE_LINE_SEPARATOR",
    "ARRAY_SEPARATOR",
    "WRAPPER_PREFIX",
    "WRAPPER_SUFFIX",
    "UNDEFINED_PARAM",
]

# ============================================================================
# BUNDLE NAMING
# ============================================================================

# Grails keeps its message bundles in grails-app/i18n/messages[_locale].properties
DEFAULT_BUNDLE_DIR: str = "grails-app/i18n"
DEFAULT_BUNDLE_BASENAME: str = "messages"
DEFAULT_BUNDLE_EXTENSION: str = ".properties"
DEFAULT_ASSET_EXTENSION: str = ".i18n"
DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum bundle file size in bytes (10 MB).
# Real message bundles are a few hundred KB at most.
MAX_BUNDLE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# OUTPUT FORMAT
# ============================================================================

# The generated wrapper is consumed verbatim by existing pages.
# Any change to these strings breaks byte-for-byte compatibility.
TABLE_INDENT: str = " " * 8
TABLE_LINE_SEPARATOR: str = ",\n"
ARRAY_SEPARATOR: str = ", "

WRAPPER_PREFIX: str = """(function (win) {
    var messages = {
"""

WRAPPER_SUFFIX: str = """
    };

    win.$L = function (code) {
        var message = messages[code];
        if(message === undefined) {
            return "[" + code + "]";
        } else if(message instanceof Array) {
            var params;
            if (arguments.length === 2 && (arguments[1]) instanceof Array) {
                params = arguments[1];
            } else {
                params = Array.prototype.slice.call(arguments);
                params.shift();
            }
            var result = "";
            for(var i = 0; i < message.length; i++) {
                if(typeof message[i] === "number") {
                    result += params[message[i]];
                } else {
                    result += message[i];
                }
            }
            return result;
        } else {
            return message;
        }
    }
}(this));
"""

# What the JavaScript runtime concatenates for a missing positional argument.
UNDEFINED_PARAM: str = "undefined"
