# structkit

Classic data structures, ketama consistent hashing, a few string helpers
and a small rotating file logger, in pure Python with no third-party
dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `structkit.heap` | `Heap`: array-based binary min-heap ordered by a comparator |
| `structkit.stack` | `Stack`: LIFO stack that reserves capacity in growing steps |
| `structkit.linkedlist` | `LinkedList`, `ListIterator`: doubly linked list with a two-way cursor |
| `structkit.linkedqueue` | `Queue`: FIFO queue built on `LinkedList` |
| `structkit.hashmap` | `HashMap`: open-addressing hash table (linear probing, DJBX33A hash) |
| `structkit.skiplist` | `SkipList`, `SkipListNode`, `SkipListIterator`: items sorted by score |
| `structkit.ketama` | `KetamaRing`, `KetamaNode`: ketama consistent hashing |
| `structkit.md5` | `md5_signature` (16-byte digest), `hash_md5` (first four digest bytes as a little-endian uint32) |
| `structkit.strings` | `search` (Boyer-Moore bad-character search), `rand_string`, `replace` |
| `structkit.signals` | `register`: install a signal handler and get the previous one back |
| `structkit.log` | `Logger`, `Level`, `LogError`: file or stderr logger with size-based rotation |

## Installation

```
pip install .
```

## Examples

A min-heap with a comparator that returns a negative number when its first
argument sorts first (with no comparator, items compare with `<` and `>`):

```python
from structkit.heap import Heap

heap = Heap(lambda a, b: a - b)
for value in (3, 1, 2):
    heap.push(value)
assert heap.pop() == 1
assert heap.top() == 2
```

Spreading keys over servers with consistent hashing. Every node puts
`160 * weight` points on the ring; `get` returns the point that owns a key,
and the point's `idx` is the position of its node in the list given:

```python
from structkit.ketama import KetamaNode, KetamaRing

ring = KetamaRing([
    KetamaNode("127.0.0.1:8000", 1),
    KetamaNode("127.0.0.1:8001", 2),
])
print(len(ring))               # 480 points on the ring
print(ring.get("user:42").key)  # the server for this key
```

A skiplist keyed by score:

```python
from structkit.skiplist import SkipList

sl = SkipList(None)
sl.push(3, "c")
sl.push(1, "a")
assert sl.first().score == 1
assert sl.get(3) == "c"
assert list(sl) == [(1, "a"), (3, "c")]
```

A hash map keyed by `str` or `bytes` (keys compare by their bytes, so `"a"`
and `b"a"` are the same key):

```python
from structkit.hashmap import HashMap

m = HashMap()
m["port"] = 8125
assert m.get("missing") is None
assert m.pop("port") == 8125
```

String helpers; `search` returns `len(s)` when the substring is absent:

```python
from structkit.strings import replace, search

assert search("this is a simple example", "is", 3) == 5
assert replace("abcdbcefghbcio", "bc", "xyz") == "axyzdxyzefghxyzio"
```

Logging to a file that rotates after 1 MiB. Each line carries the time with
milliseconds, the level, the logger name and the thread id; on rotation the
file is renamed with a timestamp suffix and a fresh one is opened. With
`filename=None` lines go to stderr:

```python
from structkit.log import Level, Logger

with Logger("app", "app.log", 1024 * 1024) as log:
    log.set_level(Level.DEBUG)
    log.info("listening on port %d", 8125)
```

## Errors

Empty containers raise `IndexError` from `pop`, `top`, `head`, `tail`,
`first`, `last` and the like; a missing key raises `KeyError` from
`HashMap[...]`, `HashMap.pop` without a default, `SkipList.get` and
`SkipList.pop`. `Heap.grow` and `Stack.grow` raise `MemoryError` past their
capacity limits. The logger raises `LogError` when its file cannot be
opened, written or renamed.

## What this package does not do

It is a library only: it installs no command-line program. Apart from
`Logger`, which serialises its writes with a lock, the structures are not
safe to share between threads without locking of your own.

## Running the tests

```
pip install .[test]
pytest
```