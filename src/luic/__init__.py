"""luic - compiler for the LUI stylesheet language."""

__version__ = "0.3.0"

from luic.compiler import CompileResult, compile_file, compile_source  # noqa: E402
from luic.config import CompileOptions  # noqa: E402
from luic.errors import CompileError, ErrorKind  # noqa: E402

__all__ = [
    "__version__",
    "CompileError",
    "CompileOptions",
    "CompileResult",
    "ErrorKind",
    "compile_file",
    "compile_source",
]
