# Environment variables consulted for provider-level defaults.
# First non-empty value wins, same precedence as the Google provider.
PROJECT_ENV_VARS = [
    "GOOGLE_PROJECT",
    "GOOGLE_CLOUD_PROJECT",
    "GCLOUD_PROJECT",
    "CLOUDSDK_CORE_PROJECT",
]

ZONE_ENV_VARS = [
    "GOOGLE_ZONE",
    "GCLOUD_ZONE",
    "CLOUDSDK_COMPUTE_ZONE",
]

USER_AGENT_PRODUCT = "machinescope"

# Synthesized state id, not returned by the API
MACHINE_TYPE_ID_TEMPLATE = "projects/{project}/zones/{zone}/machineTypes/{name}"
