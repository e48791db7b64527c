from .errors import (AcquisitionError, NetworkError, NotFoundError, RateLimitedError,
                     RemoteError, ValidationError)
from .models import CommitActivityPoint, Profile, Repository, SyntheticDataset
from .orchestrator import Mode, Phase, ProfileAcquirer, RequestState
from .synthetic import derive_seed, generate_activity, generate_dataset

__all__ = [
    "AcquisitionError", "NetworkError", "NotFoundError", "RateLimitedError", "RemoteError", "ValidationError",
    "CommitActivityPoint", "Profile", "Repository", "SyntheticDataset",
    "Mode", "Phase", "ProfileAcquirer", "RequestState",
    "derive_seed", "generate_activity", "generate_dataset",
]
