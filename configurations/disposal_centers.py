"""Built-in disposal-center catalog used when no external catalog is configured."""

DEFAULT_DISPOSAL_CENTERS = [
    {
        "id": "1",
        "name": "EcoCenter Downtown",
        "address": "123 Green St, City",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "accepted_waste_types": ["plastic", "metal", "glass"],
        "hours": "Mon-Fri 8AM-6PM",
        "rating": 4.5,
    },
    {
        "id": "2",
        "name": "Recycling Plus",
        "address": "456 Earth Ave, City",
        "latitude": 40.7589,
        "longitude": -73.9851,
        "accepted_waste_types": ["electronic", "battery", "plastic"],
        "hours": "Daily 7AM-7PM",
        "rating": 4.2,
    },
    {
        "id": "3",
        "name": "Green Disposal Hub",
        "address": "789 Eco Blvd, City",
        "latitude": 40.6782,
        "longitude": -73.9442,
        "accepted_waste_types": ["organic", "food", "yard"],
        "hours": "Mon-Sat 9AM-5PM",
        "rating": 4.0,
    },
    {
        "id": "4",
        "name": "Hazmat Facility",
        "address": "321 Safe Way, City",
        "latitude": 40.7306,
        "longitude": -73.9352,
        "accepted_waste_types": ["hazardous", "paint", "chemical"],
        "hours": "Tue-Thu 9AM-3PM",
        "rating": 4.3,
    },
    {
        "id": "5",
        "name": "Textile Recycling Co",
        "address": "654 Fashion Ave, City",
        "latitude": 40.7505,
        "longitude": -73.9934,
        "accepted_waste_types": ["textile", "clothing", "shoes"],
        "hours": "Mon-Fri 10AM-6PM",
        "rating": 4.1,
    },
    {
        "id": "6",
        "name": "E-Waste Solutions",
        "address": "987 Tech Blvd, City",
        "latitude": 40.7831,
        "longitude": -73.9712,
        "accepted_waste_types": ["electronic", "phone", "computer"],
        "hours": "Wed-Sun 8AM-5PM",
        "rating": 4.4,
    },
]
