"""
Decoding a paged response

The body below is what a paging backend returns for GET /orders?page=2&size=3.
The client declares the abstract Page[Order] and gets a PageModel back.
"""

from datetime import datetime

from pydantic import BaseModel

from pagantic import DecoderConfig, JsonDecoder, Page


class Order(BaseModel):
    """An order as serialized by the backend"""

    id: int
    customer: str
    created_at: datetime


body = b"""
{
  "content": [
    {"id": 107, "customer": "ada", "created_at": "2024-03-01T10:00:00Z"},
    {"id": 108, "customer": "grace", "created_at": "2024-03-01T11:30:00Z"},
    {"id": 109, "customer": "linus", "created_at": "2024-03-02T09:15:00Z"}
  ],
  "page": {
    "number": 2,
    "size": 3,
    "totalElements": 5,
    "sort": [{"property": "created_at", "direction": "DESC"}]
  }
}
"""

decoder = JsonDecoder()
page = decoder.decode(body, Page[Order])

print(page)  # Page 2 of 2 containing __main__.Order instances
print(f"Elements on page: {page.number_of_elements}")
print(f"Total elements:   {page.total_elements}")  # 9: the reported 5 is stale
print(f"Sorted by:        {page.sort}")

for order in page:
    print(f"  #{order.id} {order.customer} at {order.created_at:%Y-%m-%d %H:%M}")

if page.has_previous:
    previous = page.previous_pageable()
    print(f"Previous page: number={previous.number} size={previous.size}")

# Reject out-of-range page metadata instead of accepting it as-is
strict = JsonDecoder(config=DecoderConfig(strict_page_requests=True))
strict.decode(body, Page[Order])
