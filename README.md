# exercisekit

A collection of small, self-contained programming exercises with working
solutions. Each module solves one problem and can be imported as a library;
many can also be run from the command line.

## Installation

```
pip install exercisekit
```

For running the test suite:

```
pip install "exercisekit[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `exercisekit.collatz` | `collatz_length(n)`: number of terms in the Collatz sequence starting at `n` |
| `exercisekit.fibonacci` | `fib(n)`: the n-th Fibonacci number; negative `n` raises `ValueError` |
| `exercisekit.matrix` | `transpose(matrix)`: transpose a rectangular matrix given as rows; ragged rows raise `ValueError` |
| `exercisekit.vectors` | `magnitude(vector)` and in-place `normalize(vector)`; a zero vector raises `ValueError` |
| `exercisekit.generic_min` | `min_of(left, right)`: the smaller of two values, `left` when equal |
| `exercisekit.offsets` | `offset_differences(offset, values)`: `values[(n + offset) % len] - values[n]` for each `n` |
| `exercisekit.counter` | `ValueCounter` with `count(value)` and `times_seen(value)` |
| `exercisekit.rot` | `rotate(data, rot)` on bytes, and `RotDecoder`, a readable stream that rotates ASCII letters |
| `exercisekit.expression` | Expression trees (`Value`, `Op`, `Operation`) and `evaluate`, raising `DivideByZeroError` |
| `exercisekit.protobuf` | A small protobuf wire-format parser: `parse_varint`, `parse_field`, `parse_message(data, Person)`, raising `ProtobufError` |
| `exercisekit.binary_tree` | `BinaryTree`: a set of values in an unbalanced binary search tree, with `insert`, `has`, `in` and `len` |
| `exercisekit.package_builder` | `PackageBuilder`, `Package`, `Dependency`, `Language` |
| `exercisekit.widgets` | Text-mode widgets: `Window`, `Label`, `Button` |
| `exercisekit.verbosity` | `Logger`, `StderrLogger` and a `VerbosityFilter` |
| `exercisekit.elevator` | Elevator events and the functions that create them |
| `exercisekit.listdir` | `DirectoryIterator`: the names in a directory, starting with `.` and `..` |
| `exercisekit.tasks` | Project task runner (`Task`, `execute_task`, `TaskError`) |
| `exercisekit.philosophers` | Dining philosophers with threads: `dine(names, rounds)` |
| `exercisekit.async_philosophers` | Dining philosophers with asyncio: `dine(names, rounds)` as an async iterator |
| `exercisekit.link_checker` | A multi-threaded link checker: `check_links(start_url, thread_count)` |
| `exercisekit.chat_server` | A broadcast WebSocket chat server: `ChatServer` |
| `exercisekit.chat_client` | A WebSocket chat client: `run_client(uri, lines, output)` |

## Library examples

```python
from exercisekit.collatz import collatz_length
from exercisekit.expression import Op, Operation, Value, evaluate
from exercisekit.binary_tree import BinaryTree
from exercisekit.protobuf import Person, parse_message

collatz_length(11)                                   # 15
evaluate(Op(Operation.SUB, Value(20), Value(10)))    # 10

tree = BinaryTree()
for value in (2, 1, 2, 3):
    tree.insert(value)
len(tree)      # 3
3 in tree      # True

parse_message(bytes([0x10, 0x2A]), Person)           # Person(name='', id=42, phone=[])
```

Dividing by zero in an expression raises `DivideByZeroError`, a subclass
of `ZeroDivisionError`; division otherwise truncates toward zero:

```python
from exercisekit.expression import DivideByZeroError, Op, Operation, Value, evaluate

try:
    evaluate(Op(Operation.DIV, Value(99), Value(0)))
except DivideByZeroError:
    print("cannot divide by zero")
```

## Command-line programs

Each of these runs the module's demonstration:

```
exercisekit-collatz [N]          # default 11
exercisekit-fibonacci [N]        # default 20
exercisekit-transpose
exercisekit-vectors
exercisekit-counter
exercisekit-package-builder
exercisekit-widgets
exercisekit-verbosity
exercisekit-elevator
exercisekit-listdir              # lists the current directory
exercisekit-philosophers         # five philosophers, one thread each
exercisekit-async-philosophers   # two philosophers as asyncio tasks
```

The link checker crawls from a start page, follows links on pages of the
start page's domain, checks links elsewhere without following them, and
prints the URLs that could not be fetched:

```
exercisekit-link-checker https://example.com --threads 8
```

The chat programs talk to each other over WebSockets, by default on
127.0.0.1, port 2000. Start the server in one terminal and one or more
clients in others; every line typed into a client is broadcast to all
connected clients:

```
exercisekit-chat-server [--host HOST] [--port PORT]
exercisekit-chat-client [ws://127.0.0.1:2000]
```

The task runner drives a course project's tooling. Its tasks are
`install-tools`, `web-tests`, `rust-tests`, `serve` and `build`; it runs in
the directory named by `CARGO_WORKSPACE_DIR`, or the current directory,
and uses the `cargo` given by `CARGO` when set. List the tasks with:

```
exercisekit-tasks --help
```

## What it does not do

The task runner only starts external tools: `cargo`, `npm` and `mdbook`
must already be installed, and it does not build or serve anything itself.
The chat server keeps no history and has no accounts or rooms; a client
that falls more than 16 messages behind is disconnected with an error.