from keywire.failure_policy import FailurePolicy

DEFAULT_FAILURE_POLICY = FailurePolicy.STICKY
