"""
Server entry point.

Usage:
    python -m mindmenu.main

Dependencies: uvicorn, mindmenu.api.main
System role: Process launcher for the API server
"""

import uvicorn


def main() -> None:
    uvicorn.run(
        "mindmenu.api.main:app",
        host="0.0.0.0",
        port=8000,
    )


if __name__ == "__main__":
    main()
