"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks for whatever the command line
left out, unless told to stay non-interactive. Messages go in and come out as hex, as textbook RSA has no notion of
text encodings.

Typical usage example:

    rawrsa encrypt -p key.pub --message 05
    OR
    python -m rawrsa
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing
import warnings

import rawrsa
from rawrsa import pem


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in rawrsa.",
            choices=["encrypt", "decrypt", "show"],
        ),
    "encrypt":
        HelpData("Textbook encryption utility."),
    "decrypt":
        HelpData("Textbook decryption utility."),
    "show":
        HelpData("Key inspection utility."),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
        ),
    "key":
        HelpData(
            description="Location of a public or private key file.",
            format=pathlib.Path,
        ),
    "message":
        HelpData(
            description="Hex encoded message or path to file containing raw payload. If Path start with `P:`",
            format=str,
        ),
}

needs = {
    "encrypt": ("public_key", "message"),
    "decrypt": ("private_key", "message"),
    "show": ("key",),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", type=help_dict["message"].format, help=help_dict["message"].description)
corep = argparse.ArgumentParser(prog="rawrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rawrsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Log key loading details")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

encrypt = commands.add_parser("encrypt", parents=[pubkey, payloads], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[privkey, payloads], help=help_dict["decrypt"].description)
decrypt.add_argument("--crt", action="store_true", help="Use the CRT components of the key to decrypt")
show = commands.add_parser("show", help=help_dict["show"].description)
show.add_argument("--key", "-k", type=help_dict["key"].format, help=help_dict["key"].description)


def checkmodes(arg: str, non_interactive: bool):
    helper_data = help_dict[arg]
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    vald = set(helper_data.choices)
    for choice in helper_data.choices:
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}")
        else:
            prntr(choice)
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        prntr("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def check_message(mess: str) -> bytes:
    """Parse message for path-notice, hex otherwise."""
    if mess.startswith("P:"):
        with open(mess[2:], "rb") as f:
            return f.read()
    return bytes.fromhex(mess)


def describe_key(file: pathlib.Path) -> str:
    """Loads whichever key half the file holds and renders it."""
    label, _ = pem.read_pem(file)
    if label in pem.PRIVATE_LABELS:
        return str(pem.load_private_key(file))
    return str(pem.load_public_key(file))


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    non_interactive = args.non_interactive
    if args.verbose:
        rawrsa.setup_logging(logging.INFO)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not non_interactive:
            print(text)

    pspr("Welcome to rawrsa!\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", non_interactive)
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                if help_dict[reqs].choices is not None:
                    res = choice_handler(reqs, non_interactive)
                else:
                    res = input_handler(reqs, non_interactive)
                setattr(args, reqs, res)
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
        pspr("\nInput Complete! Executing...")
        match args.subcommand:
            case "encrypt":
                warnings.warn("Textbook RSA is unsecure! Please use with care.", RuntimeWarning)
                message = check_message(args.message)
                rpu = rawrsa.load_public_key(args.public_key)
                ciph = rawrsa.encrypt(rpu, message)
                pspr("Ciphertext:")
                print(ciph.hex())
            case "decrypt":
                message = check_message(args.message)
                rpk = rawrsa.load_private_key(args.private_key)
                decryptor = rawrsa.decrypt_crt if getattr(args, "crt", False) else rawrsa.decrypt
                clear = decryptor(rpk, message)
                pspr("Cleartext:")
                print(clear.hex())
            case "show":
                print(describe_key(args.key))
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    pspr("Thank you for using rawrsa!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
