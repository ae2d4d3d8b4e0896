#!/usr/bin/env python3
"""
Cadastrar um novo usuario no arquivo db.json.

Uso:
  edu-user <firstname> <lastname> <email> [--store db.json] [--verbose]
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from edu.core.config import get_settings
from edu.core.logs import configure_logging
from edu.repositories.json_storage import RecordStore, StoreError
from edu.services.user_service import UserService, ValidationError

USAGE = "Usage: edu <firstname> <lastname> <email>"

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_STORE = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="edu-user", description="Cadastrar usuario", usage=USAGE[len("Usage: "):])
    ap.add_argument("fields", nargs="*", metavar="field", help="firstname lastname email")
    ap.add_argument("--store", help="Caminho do arquivo de usuarios (default: EDU_USERS_FILE)")
    ap.add_argument("--verbose", action="store_true", help="Imprimir o id do usuario criado")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if len(args.fields) != 3:
        print(USAGE)
        return EXIT_INVALID
    firstname, lastname, email = args.fields

    store = RecordStore(args.store, indent=settings.json_indent) if args.store else None
    try:
        user = UserService(store).register(firstname, lastname, email)
    except ValidationError as exc:
        print(exc.message)
        return EXIT_INVALID
    except StoreError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return EXIT_STORE
    if args.verbose:
        print(f"OK: usuario cadastrado (id {user.id})")
    return EXIT_OK


def run() -> None:
    try:
        code = main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
    raise SystemExit(code)


if __name__ == "__main__":
    run()
