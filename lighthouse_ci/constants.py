# The MIT License (MIT)
# Copyright © 2025 Entrius

# =============================================================================
# Lighthouse CI backend
# =============================================================================
DEFAULT_CI_HOST = 'https://lighthouse-ci.appspot.com'
RUN_ON_CHROME_PATH = '/run_on_chrome'
RUN_ON_WPT_PATH = '/run_on_wpt'
API_KEY_HEADER = 'X-API-KEY'

# =============================================================================
# GitHub API
# =============================================================================
BASE_GITHUB_API_URL = 'https://api.github.com'
GITHUB_API_TIMEOUT = 10  # seconds
RATE_LIMIT_MIN_REMAINING = 10  # warn when fewer requests remain

# =============================================================================
# Environment variables
# =============================================================================
CI_HOST_ENV = 'CI_HOST'
API_KEY_ENV = 'LIGHTHOUSE_API_KEY'
DEPRECATED_API_KEY_ENV = 'API_KEY'
GITHUB_TOKEN_ENV = 'GITHUB_TOKEN'

# Travis CI, TRAVIS_PULL_REQUEST is "false" on push builds
TRAVIS_PULL_REQUEST_ENV = 'TRAVIS_PULL_REQUEST'
TRAVIS_PULL_REQUEST_SHA_ENV = 'TRAVIS_PULL_REQUEST_SHA'
TRAVIS_PULL_REQUEST_SLUG_ENV = 'TRAVIS_PULL_REQUEST_SLUG'

# CircleCI, CIRCLE_PR_NUMBER is only set for builds of forked PRs
CIRCLE_PR_NUMBER_ENV = 'CIRCLE_PR_NUMBER'
CIRCLE_PULL_REQUEST_ENV = 'CIRCLE_PULL_REQUEST'
CIRCLE_SHA1_ENV = 'CIRCLE_SHA1'
CIRCLE_PROJECT_USERNAME_ENV = 'CIRCLE_PROJECT_USERNAME'
CIRCLE_PROJECT_REPONAME_ENV = 'CIRCLE_PROJECT_REPONAME'
CIRCLE_REPOSITORY_URL_ENV = 'CIRCLE_REPOSITORY_URL'

CI_ENV_VARS = (
    TRAVIS_PULL_REQUEST_ENV,
    TRAVIS_PULL_REQUEST_SHA_ENV,
    TRAVIS_PULL_REQUEST_SLUG_ENV,
    CIRCLE_PR_NUMBER_ENV,
    CIRCLE_PULL_REQUEST_ENV,
    CIRCLE_SHA1_ENV,
    CIRCLE_PROJECT_USERNAME_ENV,
    CIRCLE_PROJECT_REPONAME_ENV,
    CIRCLE_REPOSITORY_URL_ENV,
)

# =============================================================================
# Exit codes
# =============================================================================
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_RUN_FAILED = 1
