# tamboon

Tools for processing charity donations ("tamboon"). A donation batch is a
CSV file, usually stored ROT-128 encoded, with one donor per row. Each row
names a donor, an amount in subunits and the card to charge. The package
charges every donation through a payment service you supply and sums up
what was received, what was donated successfully and what failed.

## What is inside

- `tamboon.money`: `Money`, an immutable currency-tagged amount. It holds a
  `Decimal` in `value` and exposes it as a float through `amount`.
  `Money.from_float` and the results of `multiplied_by` and `divided_by`
  are rounded half away from zero to two places; `str(money)` always shows
  two decimals. Mixing currencies in `add` or `subtract` raises
  `MismatchedCurrencyError`; `divided_by(0)` raises `DivideByZeroError`.
  Both derive from `MoneyError`, a `ValueError`.
- `tamboon.card`: `Card`, a validated payment card. Text fields are stripped.
  An expiry month outside 1–12 raises `InvalidExpiryMonthError`, a year
  outside 2000–9999 raises `InvalidExpiryYearError`, and a blank number,
  holder or security code raises `FieldValueRequiredError` (all are
  `CardError`). `is_expired(now=None)` compares the expiry month with the
  current month in Bangkok time.
- `tamboon.transaction`: `Transaction` and `TransactionStatus`
  (`created`, `succeeded`, `failed`). `mark_succeeded(ref_id)` and
  `mark_failed(message)` raise `MissingExternalRefIdError` and
  `MissingFailureDetailError` when given blank text.
  `TransactionNotFoundError` is available for services that are handed no
  transaction.
- `tamboon.payment`: the abstract `PaymentService` (a `gateway` property
  and `charge(card, transaction)`), the `PaymentGateway` enumeration and the
  `ChargeCreditCard` use case. `ChargeCreditCard.execute(card, amount,
  currency)` creates a transaction, lets the service charge it and returns
  it; transaction errors raised by the service are swallowed.
- `tamboon.donation`: a single donation (`SongPahPa`), the running tally
  (`TonPahPa`) and its `TonPahPaSummary` with `total`, `successful`,
  `faulty`, `average` and `donor_count`. The average is the successful sum
  divided by the number of successful donors, or zero if there are none.
- `tamboon.fry_pah_pa`: `FryPahPaUseCase`, which reads a donation CSV,
  checks its header row, charges each row and returns the summary. Also
  `validate_header_row` and `parse_record`.
- `tamboon.console`: `print_summary(summary, out=None)`, which writes a
  summary as an aligned table (to standard output by default), and
  `format_amount`.
- `tamboon.rot128`: ROT-128 encoding and decoding of bytes, streams and
  files.
- `tamboon.webapp`: a small HTTP API built on Flask.

## Input format

The CSV must start with exactly this header row:

```
Name,AmountSubunits,CCNumber,CVV,ExpMonth,ExpYear
```

`AmountSubunits` is in satang, so `10000` means 100.00 THB. Rows that cannot
be parsed, that have the wrong number of fields, an invalid card or a
non-positive amount are skipped. A missing or wrong header row makes
`FryPahPaUseCase.execute` raise `InvalidHeaderError`.

## Working with money

```python
from tamboon.money import DivideByZeroError, Money

price = Money.from_float("thb", 234.1259)
print(price)                       # 234.13

total = price.add(Money.from_float("thb", 10))
share = total.divided_by(4)

try:
    total.divided_by(0)
except DivideByZeroError:
    ...
```

## ROT-128 data

ROT-128 adds 128 to every byte, so encoding and decoding are the same
operation:

```python
from tamboon.rot128 import open_and_decode_rot128_file, rot128

encoded = rot128(b"Name,AmountSubunits")
assert rot128(encoded) == b"Name,AmountSubunits"

with open_and_decode_rot128_file("donations.csv.rot128") as reader:
    plain = reader.read()
```

`Rot128Reader` decodes from any binary stream and closing it closes that
stream; `Rot128Writer` encodes everything written to it into another binary
stream.

## Processing a batch

`FryPahPaUseCase` needs a `ChargeCreditCard` use case, which wraps a
`PaymentService`. The package does not ship a service that talks to a real
payment gateway; you implement `PaymentService` yourself:

```python
import io
import sys

from tamboon.console import print_summary
from tamboon.fry_pah_pa import FryPahPaUseCase
from tamboon.payment import ChargeCreditCard, PaymentGateway, PaymentService
from tamboon.rot128 import open_and_decode_rot128_file


class AcceptAll(PaymentService):
    @property
    def gateway(self):
        return PaymentGateway.OMISE

    def charge(self, card, transaction):
        transaction.mark_succeeded("charge-reference")


use_case = FryPahPaUseCase(ChargeCreditCard(AcceptAll()))
with open_and_decode_rot128_file("donations.csv.rot128") as reader:
    text = io.TextIOWrapper(io.BufferedReader(reader), encoding="utf-8", newline="")
    summary = use_case.execute(text)
print_summary(summary, sys.stdout)
```

The printed table shows the total received, the amount successfully
donated, the faulty amount and the average per successful donor.

`execute_bulk(rows)` takes already split rows (the first being the header),
charges them concurrently on a thread pool and adds them to the same tally;
read it back with `use_case.ton_pah_pa.summary()`.

## HTTP API

Start the server with:

```
tamboon-api
```

It listens on `0.0.0.0:3001` by default; `--host` and `--port` change that.
It serves:

| Method | Path                   | Form field | Result                                   |
|--------|------------------------|------------|------------------------------------------|
| POST   | `/file/rot128/encode`  | `file`     | the upload, ROT-128 encoded (text/plain) |
| POST   | `/file/rot128/decode`  | `file`     | the upload, ROT-128 decoded              |
| POST   | `/pahpa/bulk`          | `file`     | `{"status": true, "data": {"tasks": n}}` |

The encode and decode routes answer a missing `file` field with HTTP 400 and
`{"message": "http: no such file"}`.

`/pahpa/bulk` expects a single ROT-128 encoded CSV upload. It checks the
header and that every row has the same number of fields, then logs each
row and reports how many rows it saw; it does not charge any cards. Errors
come back as `{"status": false, "data": null, "code": "...", "message": "..."}`
with HTTP 400, using the codes `INVALID_FORM` (no upload), `INVALID_IMPORT`
(more than one upload), `INVALID_FILE` and `INVALID_INPUT` (unreadable
header or CSV).

To embed the API in another WSGI server, build the application with
`tamboon.webapp.create_app()`.

## What it does not do

- There is no command for processing a donation file from the terminal;
  use `FryPahPaUseCase` and `print_summary` from Python as shown above.
- No payment gateway client is included; charging goes through whatever
  `PaymentService` you provide.