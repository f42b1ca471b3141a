# reroute/approval/exceptions.py
"""
Approval workflow exceptions
"""

class ApprovalError(Exception):
    """Base class for approval workflow errors"""
    pass

class InvalidTransitionError(ApprovalError):
    """Requested operator action is not valid in the current workflow state"""
    def __init__(self, action, state, message="Invalid transition"):
        self.action = action
        self.state = state
        super().__init__(f"{message}: '{action}' while {state}")

class ProposalNotFoundError(ApprovalError):
    """Operator referenced a proposal that is not in the open set"""
    def __init__(self, proposal_id, message="Proposal not found"):
        self.proposal_id = proposal_id
        super().__init__(f"{message}: {proposal_id}")
