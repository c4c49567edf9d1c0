"""examples/multithreaded_usage.py - Shared façade across threads.

Every thread logs through the same process-wide LogCat, under the same
application tag. While workers run, the main thread dumps the thread list
and the stack of one worker.

Run:
    python examples/multithreaded_usage.py
"""

import threading
import time

import xloglib

TAG = "Orders"

# ---------------------------------------------------------------------------
# Setup: initialise before starting threads; force verbose for the demo
# ---------------------------------------------------------------------------
xloglib.init("xLogLib", True)


# ---------------------------------------------------------------------------
# Business logic
# ---------------------------------------------------------------------------


def fetch_inventory(product_id: int, release: threading.Event) -> int:
    """Simulate a slow DB read for product stock."""
    xloglib.d(TAG, "fetching inventory: product_id=%d", product_id)
    release.wait(timeout=5)
    stock = {1: 10, 2: 0, 3: 5}
    return stock.get(product_id, 0)


def place_order(order_id: int, product_id: int, qty: int, release: threading.Event) -> None:
    xloglib.i(TAG, "order received: order_id=%d, qty=%d", order_id, qty)
    try:
        stock = fetch_inventory(product_id, release)
        if stock < qty:
            raise RuntimeError(f"OutOfStock: product_id={product_id}")
    except RuntimeError as exc:
        xloglib.e(TAG, "order %d failed" % order_id, exc)
        return
    xloglib.i(TAG, "order placed: order_id=%d", order_id)


if __name__ == "__main__":
    release = threading.Event()
    workers = [
        threading.Thread(target=place_order, args=(1001, 1, 3, release), name="TEST - 0"),
        threading.Thread(target=place_order, args=(1002, 2, 1, release), name="TEST - 1"),
    ]
    for t in workers:
        t.start()

    time.sleep(0.1)
    xloglib.print_threads("Main", xloglib.INFO)
    xloglib.print_stack_trace("Main", xloglib.INFO, workers[1])

    release.set()
    for t in workers:
        t.join()

    xloglib.print_stack_trace("Main", xloglib.INFO, None)   # warns: thread is null
