from .ca_sacramento import AUTHORITIES_OMI_120_SAC

__all__ = ["AUTHORITIES_OMI_120_SAC"]
