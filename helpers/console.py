# helpers/console.py
import logging
import threading

from reroute.simulation import ConsoleController

class ConsoleTicker(threading.Thread):
    """
    Background worker that drives the console's animation tick.

    A failing tick is logged and the loop carries on; `stop()` ends the
    loop at the next wait instead of killing the thread mid-update.
    """

    def __init__(self, controller: ConsoleController, interval_sec: float = 1.0):
        super().__init__(name="console-ticker", daemon=True)
        self.controller = controller
        self.interval_sec = interval_sec
        self._stop_event = threading.Event()

    def stop(self):
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self):
        logging.info(f"Console ticker started ({self.interval_sec}s interval).")
        while not self._stop_event.wait(self.interval_sec):
            try:
                self.controller.on_tick()
            except Exception as e:
                logging.error(f"ERROR in console ticker: {e}", exc_info=True)
        logging.info("Console ticker stopped.")
