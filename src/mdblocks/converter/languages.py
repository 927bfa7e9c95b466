"""Map code fence tags onto the language identifiers the block API accepts.

Used only when :attr:`ConverterConfig.normalize_code_language
<mdblocks.config.ConverterConfig.normalize_code_language>` is enabled.
"""

from __future__ import annotations

import re

SUPPORTED_LANGUAGES: frozenset[str] = frozenset({
    "abap", "arduino", "bash", "basic", "c", "clojure", "coffeescript",
    "c++", "c#", "css", "dart", "diff", "docker", "elixir", "elm",
    "erlang", "flow", "fortran", "f#", "gherkin", "glsl", "go", "graphql",
    "groovy", "haskell", "html", "java", "javascript", "json", "julia",
    "kotlin", "latex", "less", "lisp", "livescript", "lua", "makefile",
    "markdown", "markup", "matlab", "mermaid", "nix", "objective-c",
    "ocaml", "pascal", "perl", "php", "plain text", "powershell",
    "prolog", "protobuf", "python", "r", "reason", "ruby", "rust",
    "sass", "scala", "scheme", "scss", "shell", "sql", "swift",
    "typescript", "vb.net", "verilog", "vhdl", "visual basic",
    "webassembly", "xml", "yaml", "java/c/c++/c#",
})

# Fence tags are word characters only, so aliases never contain "+" or "#".
LANGUAGE_ALIASES: dict[str, str] = {
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "sh": "shell",
    "zsh": "shell",
    "rb": "ruby",
    "rs": "rust",
    "yml": "yaml",
    "md": "markdown",
    "cs": "c#",
    "csharp": "c#",
    "cpp": "c++",
    "objc": "objective-c",
    "objective_c": "objective-c",
    "dockerfile": "docker",
    "make": "makefile",
    "tex": "latex",
    "htm": "html",
    "jsx": "javascript",
    "tsx": "typescript",
    "jsonc": "json",
    "vb": "visual basic",
    "fs": "f#",
    "fsharp": "f#",
    "golang": "go",
    "hs": "haskell",
    "kt": "kotlin",
    "pl": "perl",
    "ps1": "powershell",
    "wasm": "webassembly",
}

_TRAILING_DIGITS = re.compile(r"\d+$")


def normalize_language(tag: str, default: str) -> str:
    """Return the accepted identifier for fence *tag*, or *default*.

    >>> normalize_language("py", "plain text")
    'python'
    >>> normalize_language("python3", "plain text")
    'python'
    >>> normalize_language("brainfuck", "plain text")
    'plain text'
    """
    lang = tag.strip().lower()
    if not lang:
        return default
    for candidate in (lang, _TRAILING_DIGITS.sub("", lang)):
        if candidate in SUPPORTED_LANGUAGES:
            return candidate
        if candidate in LANGUAGE_ALIASES:
            return LANGUAGE_ALIASES[candidate]
    return default
