"""Package entry point for ``python -m grammar_checker``.

WHY: Users run the checker as ``python -m grammar_checker essay.txt``
for CLI mode, or ``python -m grammar_checker --serve`` for the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
FastAPI app under uvicorn. Otherwise, delegates to the CLI's main().
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from grammar_checker.server.app import run_api
        run_api()
    else:
        from grammar_checker.cli import main
        main()
