"""
Site configuration model.

What a client keeps per ingested site to chat with it later: the ingest
response's ids plus the crawl's title and llms.txt. Keys use the same
camelCase names as the ingest and chat payloads.

Dependencies: pydantic
System role: Client-side site record
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SiteConfig(BaseModel):
    """Everything needed to scope chat requests to one ingested page."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    index_name: str
    namespace: str
    doc_id: str
    site_name: str = Field(default="", description="Display name (page title)")
    llms_rules: str = Field(default="", description="Site's llms.txt content, if any")
    url: str
