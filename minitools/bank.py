"""Bank accounts kept as fixed-size binary records in a flat file."""

from __future__ import annotations

import os
import random
import re
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, TextIO

NAME_SIZE = 20
_RECORD = struct.Struct("<20sifi")
RECORD_SIZE = _RECORD.size
DEFAULT_PATH = "users.dat"

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _f32(value: float) -> float:
    """Round a value to single precision, as the record stores it."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


@dataclass
class Account:
    name: str
    acc_number: int
    balance: float
    pin: int


class BankError(Exception):
    """Base class for refused bank operations."""


class AccountNotFound(BankError):
    def __init__(self, acc_number: int) -> None:
        super().__init__(f"Account number, {acc_number} not found")
        self.acc_number = acc_number


class InsufficientFunds(BankError):
    def __init__(self) -> None:
        super().__init__("Sorry, Insufficient Funds")


def pack_record(account: Account) -> bytes:
    """Encode an account as one fixed-size record."""
    raw = account.name.encode("utf-8")[: NAME_SIZE - 1]
    raw = raw.decode("utf-8", "ignore").encode("utf-8")
    return _RECORD.pack(raw, account.acc_number, account.balance, account.pin)


def _from_fields(name: bytes, acc_number: int, balance: float, pin: int) -> Account:
    text = name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return Account(text, acc_number, balance, pin)


def unpack_record(data: bytes) -> Account:
    """Decode one fixed-size record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"record must be {RECORD_SIZE} bytes, got {len(data)}")
    return _from_fields(*_RECORD.unpack(data))


def generate_account_number(minvalue: int, maxvalue: int, rng: Optional[random.Random] = None) -> int:
    """Pick an account number in the inclusive range."""
    source = rng if rng is not None else random
    return source.randrange(maxvalue - minvalue + 1) + minvalue


def _positive(amount: float) -> float:
    value = _f32(float(amount))
    if not value > 0:
        raise ValueError("amount must be positive")
    return value


class Bank:
    """Accounts stored in a single binary file."""

    def __init__(self, path=DEFAULT_PATH) -> None:
        self.path = Path(path)

    def accounts(self) -> List[Account]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return []
        usable = len(data) - len(data) % RECORD_SIZE
        return [_from_fields(*fields) for fields in _RECORD.iter_unpack(data[:usable])]

    def save(self, account: Account) -> None:
        with self.path.open("ab") as fh:
            fh.write(pack_record(account))

    def user_exists(self, name: str) -> bool:
        return any(a.name == name for a in self.accounts())

    def account_exists(self, acc_number: int) -> bool:
        return any(a.acc_number == acc_number for a in self.accounts())

    def _find(self, acc_number: int, pin: int) -> Account:
        for account in self.accounts():
            if account.acc_number == acc_number and account.pin == pin:
                return account
        raise AccountNotFound(acc_number)

    def _rewrite(self, accounts: List[Account]) -> None:
        temp = self.path.with_name(self.path.name + ".tmp")
        temp.write_bytes(b"".join(pack_record(a) for a in accounts))
        os.replace(temp, self.path)

    def balance(self, acc_number: int, pin: int) -> float:
        return self._find(acc_number, pin).balance

    def _matching(self, accounts: List[Account], acc_number: int, pin: int) -> List[Account]:
        matches = [a for a in accounts if a.acc_number == acc_number and a.pin == pin]
        if not matches:
            raise AccountNotFound(acc_number)
        return matches

    def deposit(self, acc_number: int, pin: int, amount: float) -> float:
        """Add money to an account; return the new balance."""
        value = _positive(amount)
        accounts = self.accounts()
        matches = self._matching(accounts, acc_number, pin)
        for account in matches:
            account.balance = _f32(account.balance + value)
        self._rewrite(accounts)
        return matches[0].balance

    def withdraw(self, acc_number: int, pin: int, amount: float) -> float:
        """Take money from an account; return the new balance."""
        value = _positive(amount)
        accounts = self.accounts()
        matches = self._matching(accounts, acc_number, pin)
        if any(a.balance < value for a in matches):
            raise InsufficientFunds()
        for account in matches:
            account.balance = _f32(account.balance - value)
        self._rewrite(accounts)
        return matches[0].balance

    def transfer(self, acc_number: int, pin: int, amount: float, receiver: int) -> float:
        """Move money to another account; return the sender's new balance."""
        value = _positive(amount)
        accounts = self.accounts()
        sender = self._matching(accounts, acc_number, pin)[-1]
        if not any(a.acc_number == receiver for a in accounts):
            raise AccountNotFound(receiver)
        if sender.balance < value:
            raise InsufficientFunds()
        for account in accounts:
            if account.acc_number == acc_number and account.pin == pin:
                account.balance = _f32(account.balance - value)
            if account.acc_number == receiver:
                account.balance = _f32(account.balance + value)
        self._rewrite(accounts)
        return sender.balance

    def details(self, acc_number: int, pin: int) -> Account:
        return self._find(acc_number, pin)


class _Scanner:
    """Whitespace-separated reading of numbers and lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _next(self) -> str:
        while not self._pending.strip():
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending = line
        return self._pending.lstrip()

    def _match(self, pattern: re.Pattern) -> Optional[str]:
        text = self._next()
        found = pattern.match(text)
        if not found:
            self._pending = text
            return None
        self._pending = text[found.end():]
        return found.group()

    def integer(self) -> Optional[int]:
        token = self._match(_INT)
        return None if token is None else int(token)

    def real(self) -> Optional[float]:
        token = self._match(_FLOAT)
        return None if token is None else float(token)

    def discard_line(self) -> None:
        self._pending = ""

    def line(self) -> str:
        if self._pending:
            text, self._pending = self._pending, ""
        else:
            text = self._stream.readline()
            if not text:
                raise EOFError
        return text.rstrip("\n")


def _say(text: str) -> None:
    print(text, end="", flush=True)


def _ask(scanner: _Scanner, read: Callable[[], object], prompt: str, retry: str, valid: Callable) -> object:
    _say(prompt)
    while True:
        value = read()
        if value is not None and valid(value):
            return value
        _say(retry)
        scanner.discard_line()


def _four_digits(value: int) -> bool:
    return 1000 <= value <= 9999


def _ask_account(scanner: _Scanner, prompt: str = "Enter account number: ") -> int:
    return _ask(scanner, scanner.integer, prompt,
                "Invalid Account Number! Enter a 4-digit number: ", _four_digits)


def _ask_pin(scanner: _Scanner) -> int:
    return _ask(scanner, scanner.integer, "Enter 4-digit pin: ",
                "Invalid PIN! Enter a 4-digit number: ", _four_digits)


def _ask_amount(scanner: _Scanner, label: str) -> float:
    return _ask(scanner, scanner.real, f"Enter {label.lower()} amount: ",
                f"Invalid {label} Amount! Enter a positive number: \n", lambda v: v > 0)


def _print_balance(bank: Bank, acc_number: int, pin: int) -> None:
    try:
        print(f"Your account balance is {bank.balance(acc_number, pin):.2f}")
    except AccountNotFound as exc:
        print(exc)


def _create(bank: Bank, scanner: _Scanner) -> None:
    _say("Enter your name: ")
    scanner.discard_line()
    name = scanner.line()[: NAME_SIZE - 1]
    deposit = _ask(scanner, scanner.real, "Enter initial deposit: ",
                   "Invalid input! Enter a number: ", lambda v: True)
    pin = _ask_pin(scanner)
    account = Account(name, generate_account_number(1000, 9999, random.Random()), _f32(deposit), pin)
    if bank.user_exists(account.name):
        print(f"Account for username '{account.name}' already exists!")
        return
    bank.save(account)
    print("User data saved successfully!")
    print("\nAccount successfully created!")
    print(f"Account Number: {account.acc_number}")
    print(f"Account Holder: {account.name}")
    print(f"Initial Deposit: {account.balance:.2f}")


def _adjust(bank: Bank, scanner: _Scanner, withdraw: bool) -> None:
    acc_number = _ask_account(scanner)
    pin = _ask_pin(scanner)
    if not bank.account_exists(acc_number):
        print(f"User account does not exist {acc_number}")
        return
    amount = _ask_amount(scanner, "Withdrawal" if withdraw else "Deposit")
    operation = bank.withdraw if withdraw else bank.deposit
    try:
        operation(acc_number, pin, amount)
        print("Operation successful!")
    except InsufficientFunds as exc:
        print(exc)
    except AccountNotFound:
        pass
    _print_balance(bank, acc_number, pin)


def _transfer(bank: Bank, scanner: _Scanner) -> bool:
    acc_number = _ask_account(scanner)
    pin = _ask_pin(scanner)
    receiver = _ask_account(scanner, "Enter receiver's account number: ")
    if not (bank.account_exists(acc_number) and bank.account_exists(receiver)):
        print("One or both of user account(s) do(es) not exist")
        return False
    amount = _ask_amount(scanner, "Transfer")
    try:
        bank.transfer(acc_number, pin, amount, receiver)
        print("Transfer successful!")
    except AccountNotFound:
        print(InsufficientFunds())
    except InsufficientFunds as exc:
        print(exc)
    _print_balance(bank, acc_number, pin)
    return True


def _check_balance(bank: Bank, scanner: _Scanner) -> None:
    acc_number = _ask_account(scanner)
    pin = _ask_pin(scanner)
    _print_balance(bank, acc_number, pin)


def _show_details(bank: Bank, scanner: _Scanner) -> None:
    acc_number = _ask_account(scanner)
    pin = _ask_pin(scanner)
    if not bank.account_exists(acc_number):
        print(f"User account, {acc_number} does not exist")
        return
    try:
        account = bank.details(acc_number, pin)
    except AccountNotFound as exc:
        print(exc)
        return
    print(f"Account Holder: {account.name}")
    print(f"Account Number: {account.acc_number}")
    print(f"Amount in Account: {account.balance:.2f}")


_MENU = (
    "Welcome to the Bank ",
    "[1] Create Account ",
    "[2] Deposit Money ",
    "[3] Withdraw Money ",
    "[4] Transfer Money ",
    "[5] Check Balance ",
    "[6] View Account Details ",
    "[7] Exit ",
)


def _session(bank: Bank, scanner: _Scanner) -> int:
    for line in _MENU:
        print(line)
    _say("Enter choice: ")
    try:
        choice = scanner.integer()
    except EOFError:
        choice = None
    if choice is None:
        print("Invalid input! Please enter a number.")
        return 1
    if choice == 1:
        _create(bank, scanner)
    elif choice == 2:
        _adjust(bank, scanner, withdraw=False)
    elif choice == 3:
        _adjust(bank, scanner, withdraw=True)
    elif choice == 4:
        if not _transfer(bank, scanner):
            _check_balance(bank, scanner)
    elif choice == 5:
        _check_balance(bank, scanner)
    elif choice == 6:
        _show_details(bank, scanner)
    elif choice == 7:
        print("Thank you for banking with us!")
        print("Tschuss")
    return 0


def main(argv=None) -> int:
    """Run one menu session against the accounts file in the working directory."""
    try:
        return _session(Bank(), _Scanner(sys.stdin))
    except EOFError:
        return 1