from vcsrepo.lookup.local import DetectLocal
from vcsrepo.lookup.remote import DetectRemote, DetectionRule, RULES

__all__ = ['DetectLocal', 'DetectRemote', 'DetectionRule', 'RULES']
