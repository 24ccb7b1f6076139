# operator_ledger

Data structures for an operator ledger: per-epoch operator history entries,
a fixed-size circular buffer of 512 slots that keeps them ordered by epoch,
and the account layouts (`Config`, `OperatorHistory`) with their binary
encodings. No third-party libraries are needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Recording history

```python
from operator_ledger.circ_buf import CircBuf
from operator_ledger.client_version import ClientVersion
from operator_ledger.entry import OperatorHistoryEntry

history = CircBuf()
version = ClientVersion(1, 18, 4)

history.push(OperatorHistoryEntry(1_000_000, 3, 10, version, (10, 0, 0, 1)))
history.push(OperatorHistoryEntry(2_000_000, 2, 12, version, (10, 0, 0, 1)))

# Fill a gap: entries stay sorted by epoch.
history.insert(OperatorHistoryEntry(1_500_000, 4, 11, version, (10, 0, 0, 1)), 11)

print(history.last().epoch)        # 12
print(history.last().address())    # 10.0.0.1
```

A new `CircBuf` starts at index 0 with every slot holding a default entry
(epoch 0); `push` advances the index and stores the entry there, overwriting
the oldest slot once the buffer has wrapped. `last()` returns the entry at
the current index, or `None` when the buffer is marked empty. `entries()`
gives the underlying slot list.

`CircBuf.insert(entry, epoch)` raises `EpochOutOfRangeError` when the buffer
is marked empty or the epoch falls outside the stored range, and
`DuplicateEpochError` when the epoch is already present.
`find_insert_position(arr, idx, epoch)` is the search it uses. The errors
derive from `OperatorHistoryError` (in `operator_ledger.errors`), whose
`from_code` maps a numeric `ErrorCode` back to the right exception.

`ClientVersion`, `OperatorHistoryEntry`, `CircBuf`, `Config` and
`OperatorHistory` round-trip through `to_bytes()` / `from_bytes()` using a
fixed little-endian layout. `Config` and `OperatorHistory` encodings begin
with an 8-byte header whose first byte is an `AccountDiscriminator`.

## Configuration account

```python
from operator_ledger.config import Config
from operator_ledger.pubkey import Pubkey

program_id = Pubkey.from_string("SPoo1Ku8WFXoNDMHPsrGSTSG1Y47rzgn41SLUNakuHy")
address, bump, seeds = Config.find_program_address(program_id)
```

`Pubkey` parses and prints base58 addresses and derives program addresses
with `create_program_address` and `find_program_address`, raising
`InvalidSeedsError` when no valid address can be made.

`Config.load(program_id, account, expect_writable)` checks an `AccountInfo`
for owner, data, writability, discriminator and address, raising
`InvalidAccountOwnerError` or `InvalidAccountDataError` (both
`ProgramError`) on failure.

## Instructions

`OperatorHistoryInstruction.pack()` encodes an instruction as one byte, and
`OperatorHistoryInstruction.unpack(data)` decodes one, raising
`InvalidInstructionError` on unknown or malformed data.

## What this package does not do

It describes and checks accounts but does not run instructions: there is no
processor that dispatches `OperatorHistoryInstruction.INITIALIZE_CONFIG`,
creates the configuration account or writes it to any storage.