"""Domain constants for No Response.

Defines application-wide default values shared by the configuration loader,
the services and the CLI.
"""

# Default label marking issues that need a response from their author
DEFAULT_RESPONSE_REQUIRED_LABEL = "more-information-needed"

# Default color for labels created by No Response
DEFAULT_LABEL_COLOR = "ffffff"

# Default number of days to wait for a response before closing
DEFAULT_DAYS_UNTIL_CLOSE = 14

DEFAULT_CLOSE_COMMENT = (
    "This issue has been automatically closed because there has been no response "
    "to our request for more information from the original author. With only the "
    "information that is currently in the issue, we don't have enough information "
    "to take action. Please reach out if you have or find the answers we need so "
    "that we can investigate further."
)

# Value of closeComment that disables the close comment entirely
CLOSE_COMMENT_DISABLED = "false"

# Issues examined per sweep (one page of search results)
SEARCH_PAGE_SIZE = 30

# Page size used when paginating issue events and labels
EVENTS_PAGE_SIZE = 100

# state_reason sent when a stale issue is closed
CLOSE_STATE_REASON = "inactivity"

# Event name used by GitHub for issue timeline label applications
LABELED_EVENT = "labeled"
