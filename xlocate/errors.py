"""
Locator errors.

"Not found" is never an exception: every locator reports it as an empty
list. Failures raised by the tree-search engine (lxml ``XPathError``,
Playwright ``Error``) reach the caller unchanged.
"""


class LocatorError(ValueError):
    """Invalid locator input, or a query requested from a locator that has none"""
    pass
