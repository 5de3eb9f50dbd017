from threading import Lock

_registry_lock = Lock()
_class_locks = {}


class Singleton:
    """
    One shared instance per subclass, created on first use.  Request
    threads may race to create it, so construction happens under a
    per-class lock.  Put setup in __init_singleton__(), not __init__().
    """
    _instance = None

    def __new__(cls):
        if cls.__dict__.get( '_instance' ) is None:
            with cls._class_lock():
                if cls.__dict__.get( '_instance' ) is None:
                    instance = super().__new__(cls)
                    instance.__init_singleton__()
                    cls._instance = instance
        return cls._instance

    @classmethod
    def _class_lock(cls) -> Lock:
        with _registry_lock:
            return _class_locks.setdefault( cls, Lock() )

    def __init_singleton__(self):
        return
