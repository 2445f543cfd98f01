"""Static court dataset.

Read-only reference data for courts around Hickory, NC. Records are parsed
into frozen ``Court`` models once, at import time.
"""
from courts_finder.schemas.court import Court

_RAW_COURTS = [
    {
        "id": 1,
        "name": "Downtown Tennis Center",
        "sport": "tennis",
        "address": "123 Main St, Hickory, NC 28601",
        "coordinates": {"lat": 35.7344, "lng": -81.3412},
        "rating": 4.5,
        "pricePerHour": 25,
        "amenities": ["parking", "restrooms", "lighting", "pro_shop"],
        "surface": "hard",
        "indoor": False,
        "available": True,
        "image": "https://images.unsplash.com/photo-1554068865-24cecd4e34b8?w=300&h=200&fit=crop",
        "phone": "(828) 555-0123",
        "website": "https://downtowntennis.com",
    },
    {
        "id": 2,
        "name": "Community Basketball Court",
        "sport": "basketball",
        "address": "456 Oak Avenue, Hickory, NC 28601",
        "coordinates": {"lat": 35.7267, "lng": -81.3284},
        "rating": 4.2,
        "pricePerHour": 15,
        "amenities": ["parking", "outdoor", "free"],
        "surface": "asphalt",
        "indoor": False,
        "available": True,
        "image": "https://images.unsplash.com/photo-1546519638-68e109498ffc?w=300&h=200&fit=crop",
        "phone": "(828) 555-0456",
        "website": None,
    },
    {
        "id": 3,
        "name": "Elite Pickleball Club",
        "sport": "pickleball",
        "address": "789 Pine Street, Hickory, NC 28601",
        "coordinates": {"lat": 35.7289, "lng": -81.3156},
        "rating": 4.8,
        "pricePerHour": 20,
        "amenities": ["parking", "restrooms", "pro_shop", "lessons"],
        "surface": "composite",
        "indoor": True,
        "available": False,
        "image": "https://images.unsplash.com/photo-1588392382834-a891154bca4d?w=300&h=200&fit=crop",
        "phone": "(828) 555-0789",
        "website": "https://elitepickleball.com",
    },
    {
        "id": 4,
        "name": "Hickory Sports Complex",
        "sport": "multi-sport",
        "address": "789 Sports Dr, Hickory, NC",
        "coordinates": {"lat": 35.7267, "lng": -81.3221},
        "rating": 4.8,
        "pricePerHour": 35,
        "amenities": ["Indoor", "Climate Control", "Equipment Rental", "Lockers"],
        "surface": "synthetic",
        "indoor": True,
        "available": True,
        "image": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=300&h=200&fit=crop",
        "phone": "(828) 555-0901",
        "website": "https://hickorysports.com",
    },
    {
        "id": 5,
        "name": "Lenoir-Rhyne Tennis Courts",
        "sport": "tennis",
        "address": "625 7th Ave NE, Hickory, NC",
        "coordinates": {"lat": 35.7356, "lng": -81.3289},
        "rating": 4.6,
        "pricePerHour": 20,
        "amenities": ["University Access", "Well-maintained", "Parking"],
        "surface": "hard",
        "indoor": False,
        "available": True,
        "image": "https://images.unsplash.com/photo-1544966503-7cc5ac882d5d?w=300&h=200&fit=crop",
        "phone": "(828) 555-0234",
        "website": "https://lr.edu/tennis",
    },
    {
        "id": 6,
        "name": "Riverwalk Basketball Courts",
        "sport": "basketball",
        "address": "1009 1st Ave SW, Hickory, NC",
        "coordinates": {"lat": 35.7289, "lng": -81.3467},
        "rating": 4.3,
        "pricePerHour": 12,
        "amenities": ["Scenic Location", "Free Parking", "Well-lit"],
        "surface": "concrete",
        "indoor": False,
        "available": True,
        "image": "https://images.unsplash.com/photo-1578662996442-48f60103fc96?w=300&h=200&fit=crop",
        "phone": "(828) 555-0345",
        "website": None,
    },
]

COURTS = tuple(Court.model_validate(record) for record in _RAW_COURTS)
