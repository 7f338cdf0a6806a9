import logging

logger = logging.getLogger("query_string")
