import structlog
from . import log
from .record import Record
from .bst import BST
from .avltree import AVLTree
from .harness import TrialResult, run_trial, run_experiments

if not structlog.is_configured():
    log.configure()

__all__ = [
    "Record",
    "BST",
    "AVLTree",
    "TrialResult",
    "run_trial",
    "run_experiments",
]
