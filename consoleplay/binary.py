"""Convert a non-negative decimal number into its binary digits."""

from __future__ import annotations

import argparse


def digit_count(number):
    """Return the smallest n >= 1 with 2**n greater than ``number``."""
    if number <= 0:
        return 1
    return number.bit_length()


def binary_digits(number):
    """Return the binary digits of ``number``, most significant first."""
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return [0]
    digits = []
    while number >= 1:
        number, bit = divmod(number, 2)
        digits.append(bit)
    digits.reverse()
    return digits


def format_binary(number):
    """Return the digits separated as the converter prints them."""
    if number == 0:
        return "0"
    return "".join(f"{digit}  " for digit in binary_digits(number))


def main(argv=None):
    """Read a number and print its binary digits."""
    parser = argparse.ArgumentParser(
        prog="dec-to-binary", description="Convert a decimal number into binary."
    )
    parser.parse_args(argv)
    try:
        text = input("Enter the number to convert: ")
    except EOFError:
        print()
        return 1
    try:
        number = int(text.strip())
        print(format_binary(number))
    except ValueError as error:
        print(f"Error: {error}")
        return 1
    return 0