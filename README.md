# practicekit

A small, dependency-free toolbox of classic algorithms, data structures,
design patterns and concurrency helpers, plus three little command-line
tools. It needs nothing beyond the Python standard library (3.10 or later).

## Installation

```
pip install practicekit
```

To run the test suite:

```
pip install "practicekit[test]"
pytest
```

## What is inside

| Module                   | Contents                                                                 |
|--------------------------|--------------------------------------------------------------------------|
| `practicekit.graphs`     | `AStar` grid path finding, `floyd_warshall` / `reconstruct_path` (result in `ShortestPaths`), `topological_sort` (raises `CycleError`), `dijkstra` |
| `practicekit.sorting`    | `binary_search`, `merge_sort`, `merge`, `quick_sort`                     |
| `practicekit.dynamic`    | `fib`, `fib_optimized`, `knapsack`, `longest_common_subsequence`         |
| `practicekit.arith`      | `add`, `swap`, `divide`, `total`                                         |
| `practicekit.bloom`      | `BloomFilter`                                                            |
| `practicekit.trie`       | `Trie`                                                                   |
| `practicekit.containers` | `HashMap`, `BinarySearchTree`, `Graph`, `MinHeap`, `LinkedList`, `Queue`, `Stack` |
| `practicekit.patterns`   | builder (`PizzaBuilder`, `Pizza`), factory (`animal_factory`, `Dog`, `Cat`), observer (`Subject`, `EmailObserver`, `LogObserver`), singleton (`get_instance`), strategy (`SortContext`, `BubbleSort`, `QuickSortStrategy`) |
| `practicekit.ratelimit`  | `TokenBucket`, `LeakyBucket`, `VisitLimiter`                             |
| `practicekit.semaphore`  | `Semaphore`, `WeightedSemaphore`, `PermitRateLimiter`, `SemaphoreError`  |
| `practicekit.pipeline`   | `generate`, `square`, `fan_in`, `process_pool`                           |
| `practicekit.convert`    | `celsius_to_fahrenheit`, `fahrenheit_to_celsius`, `main`                 |
| `practicekit.wc`         | `count`, `Counts`, `main`                                                |
| `practicekit.jsonfmt`    | `format_json`, `main`                                                    |

## Examples

Sorting and dynamic programming:

```python
from practicekit.sorting import merge_sort, binary_search
from practicekit.dynamic import fib, knapsack, longest_common_subsequence

merge_sort([38, 27, 43, 3, 9, 82, 10])   # [3, 9, 10, 27, 38, 43, 82]
binary_search([1, 2, 3, 4, 5, 6, 7], 4)  # 3
binary_search([1, 2, 3, 4, 5, 6, 7], 10) # -1
fib(10)                                  # 55
knapsack([2, 3, 4, 5], [3, 4, 5, 6], 5)  # 7
longest_common_subsequence("abcde", "ace")  # 3
```

`divide` raises `ZeroDivisionError` when the divisor is zero; `total(*args)`
sums any number of values.

Graphs:

```python
from practicekit.graphs import AStar, INF, floyd_warshall, reconstruct_path
from practicekit.graphs import dijkstra, topological_sort, CycleError

grid = [
    [0, 0, 0],
    [1, 1, 0],
    [0, 0, 0],
]
path = AStar(grid).find_path(0, 0, 2, 0)   # list of (row, col) cells, or None

result = floyd_warshall([[0, 3, INF], [INF, 0, 1], [INF, INF, 0]])
result.distances[0][2]                       # 4
reconstruct_path(result.next_hop, 0, 2)      # [0, 1, 2]

dijkstra({0: [(1, 4), (2, 1)], 1: [(3, 1)], 2: [(1, 2), (3, 5)], 3: []}, 0)
# {0: 0, 1: 3, 2: 1, 3: 4}

try:
    order = topological_sort(3, {0: [1], 1: [2]})   # [0, 1, 2]
except CycleError:
    ...
```

In an adjacency matrix for `floyd_warshall`, a missing edge is `INF`. A
negative cycle is reported through `ShortestPaths.has_negative_cycle`.
`dijkstra` gives `UNREACHABLE` for nodes that cannot be reached.

Data structures:

```python
from practicekit.trie import Trie
from practicekit.bloom import BloomFilter
from practicekit.containers import HashMap, Stack

trie = Trie()
trie.insert("go")
trie.insert("gopher")
trie.search("go")             # True
trie.starts_with("goph")      # True
trie.words_with_prefix("gop") # ["gopher"]
len(trie)                     # 2

seen = BloomFilter(1000, 0.01)
seen.add(b"alpha")
b"alpha" in seen              # True

table = HashMap(16)
table.put("hello", 42)
table.get("hello")            # 42; a missing key raises KeyError

stack = Stack()
stack.push(1)
stack.pop()                   # 1; popping an empty stack raises IndexError
```

`BloomFilter` is sized from the expected element count and false-positive
rate, but every one of its hash positions for an element is the same bit, so
in practice it behaves like a filter with a single hash function. It accepts
`bytes`, `bytearray`, `memoryview` or `str` (encoded as UTF-8).

`LinkedList` prints as `1 -> 2 -> 3 -> nil`; `BinarySearchTree.inorder()`
yields values in ascending order; `Graph.bfs(start)` returns nodes in
breadth-first order.

Patterns:

```python
from practicekit.patterns import PizzaBuilder, animal_factory, SortContext, BubbleSort

pizza = PizzaBuilder().set_size("Large").add_cheese().add_veggie("Mushrooms").build()
animal_factory("dog").speak()                 # "Woof!"  (unknown kinds raise ValueError)
SortContext(BubbleSort()).execute([3, 1, 4, 1, 5])   # [1, 1, 3, 4, 5]
```

Rate limiting and semaphores:

```python
from practicekit.ratelimit import TokenBucket, VisitLimiter
from practicekit.semaphore import Semaphore

bucket = TokenBucket(10, 5)   # 10 tokens per second, bursts of up to 5
if bucket.allow():
    ...
bucket.wait(2)                # blocks until two tokens can be taken

visits = VisitLimiter(limit=10)
visits.allow("192.0.2.1")     # True for the first ten calls per key

with Semaphore(3):            # at most three holders at once
    ...
```

`VisitLimiter` never resets its counts; its `window` argument is stored but
not used. `LeakyBucket` drains on a background thread until `close()` is
called (or its `with` block ends). `Semaphore.acquire`,
`WeightedSemaphore.acquire` and `PermitRateLimiter.wait` take an optional
timeout in seconds and raise `TimeoutError` when it passes.

Concurrent streams:

```python
from practicekit.pipeline import generate, square, fan_in, process_pool

source = generate(1, 2, 3, 4, 5, 6)
sorted(fan_in(square(source), square(source)))   # [1, 4, 9, 16, 25, 36]
process_pool([1, 2, 3], lambda j: j * 2)         # [2, 4, 6]
```

`fan_in` yields items in arrival order; `process_pool` keeps job order.

## Command-line tools

Convert temperatures (`c2f` or `f2c`):

```
$ practicekit-convert 100 c2f
100.00°C = 212.00°F
```

A value that cannot be parsed is taken as zero; an unknown unit prints
`Unknown unit`.

Count lines, words and characters in a file:

```
$ practicekit-wc notes.txt
```

It prints `lines words chars filename`, where characters are counted as
UTF-8 bytes, not including line ends.

Pretty-print a JSON document given as an argument:

```
$ practicekit-jsonfmt '{"name":"example","tags":["a","b"]}'
{
  "name": "example",
  "tags": [
    "a",
    "b"
  ]
}
```

Object keys are sorted, indentation is two spaces, and all numbers are
treated as double-precision floats. Invalid input prints `Invalid JSON:`
followed by the reason. All three tools exit with status 0, including when
they print a usage or error message.

## What it does not do

This is a library of in-process building blocks. It has no HTTP or
WebSocket server, proxy, TCP or UDP server, port scanner or DNS tool, and it
does not read configuration files; the rate limiters and semaphores are meant
to be used from your own code, not as network middleware.