# reroute/approval/__init__.py
"""
approval - Operator approval state machine for reroute proposals
"""
from .core import ApprovalWorkflow, WorkflowState
from .exceptions import ApprovalError, InvalidTransitionError, ProposalNotFoundError

__all__ = [
    'ApprovalWorkflow',
    'WorkflowState',
    'ApprovalError',
    'InvalidTransitionError',
    'ProposalNotFoundError'
]
