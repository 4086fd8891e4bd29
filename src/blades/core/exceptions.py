# ============================================================
# ROLL FLOW EXCEPTIONS
# ============================================================

class BladesError(Exception):
    """Base exception for dice pool and roll configuration errors"""
    pass


class RollConfigurationError(BladesError):
    """A roll configuration flow was driven out of order (e.g. started twice)"""
    pass


class CharacterNotFoundError(BladesError):
    """The registry has no character under the requested id"""
    pass
