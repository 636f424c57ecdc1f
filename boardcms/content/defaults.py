"""Compiled-in default documents per content type and locale.

Responsibilities:
- Hold the English default documents used to seed storage and to fill gaps
  during normalization.
- Build per-locale Home defaults with translated copy and generic room cards.
- Memoize localized defaults per locale and hand out deep copies only.

Key public functions:
- `get_localized_default(content_key, locale)`: dispatch by content key.
- `get_localized_default_home(locale)` and siblings for each content type.
- `get_localized_generic_rooms_cards(locale)`: placeholder room cards.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable

from ..errors import UnknownContentKeyError
from ..models.content import (
    AMENITIES_CONTENT_KEY,
    CONTACT_CONTENT_KEY,
    HOME_CONTENT_KEY,
    RESERVATION_CONTENT_KEY,
    SERVICES_CONTENT_KEY,
    AmenitiesCmsContent,
    ContactCmsContent,
    HomeCmsContent,
    ReservationCmsContent,
    RoomCard,
    ServicesCmsContent,
)
from .coercion import clone_document
from .formats import parse_locale


_PHOTOS = "/images/Europaplatz_Fotos"
_SELECTION = f"{_PHOTOS}/Selection_Auswahl"

DEFAULT_VIDEO_URL = "https://www.youtube.com/watch?v=L4rcnTwr2Ek&t=77s"

DEFAULT_HOME_CONTENT: HomeCmsContent = {
    "sections": {
        "hero": {"enabled": True, "order": 1},
        "bookingPartners": {"enabled": True, "order": 2},
        "rooms": {"enabled": True, "order": 3},
        "testimonials": {"enabled": True, "order": 4},
        "facilities": {"enabled": True, "order": 5},
        "gallery": {"enabled": True, "order": 6},
        "offers": {"enabled": True, "order": 7},
        "faq": {"enabled": True, "order": 8},
    },
    "hero": {
        "titleLead": "In Stuttgart,",
        "titleHighlight": "live, stay, and work",
        "titleTail": "in one place",
        "description": (
            "256 apartments across 3 locations: 1-3 rooms, fully furnished, and ideal "
            "for short or long stays. Smart TV, fast Wi-Fi, and fully equipped kitchens "
            "for a comfortable experience."
        ),
        "ctaLocations": "See Locations",
        "ctaLocationsHref": "/hotels",
        "ctaQuote": "Request a Quote Now",
        "ctaQuoteHref": "/contact",
        "bookingPartnersTitle": "Booking Partners",
        "bookingPartnersDescription": "Reserve through our trusted platforms and partners.",
        "bookingPartnersVisibility": {"hotelsPage": True, "hotelDetailPage": True},
        "bookingPartners": [],
        "slides": [
            {"image": f"{_SELECTION}/_DSC6821-Bearbeitet.jpg", "position": "center 13%"},
            {"image": f"{_SELECTION}/_DSC6699.jpg", "position": "center 45%"},
            {"image": f"{_SELECTION}/_DSC6709.jpg", "position": "center 35%"},
            {"image": f"{_PHOTOS}/_DSC6714.jpg", "position": "center 35%"},
        ],
    },
    "rooms": {
        "subtitle": "Meri Boarding Amenities",
        "title": "Apartment Amenities",
        "description": (
            "Fully furnished apartments with thoughtful details for everyday living, "
            "work, and family stays."
        ),
        "allAmenities": "View all amenities",
        "allAmenitiesHref": "/amenities",
        "request": "Request availability",
        "requestHref": "/contact",
        "cards": [
            {
                "title": f"Card {number}",
                "icon": "fa fa-home",
                "image": "/images/placeholders/room.svg",
                "description": "Card description",
                "highlights": [],
            }
            for number in range(1, 5)
        ],
    },
    "testimonials": {
        "apartmentsCount": 256,
        "backgroundImage": f"{_SELECTION}/_DSC6629.jpg",
        "apartments": "Apartments",
        "locations": "3 locations in Stuttgart",
        "slides": [
            {
                "badge": "Fully furnished",
                "text": (
                    "1–3 room apartments designed for living and working on time, "
                    "across three Stuttgart locations."
                ),
            },
            {
                "badge": "Comfort first",
                "text": (
                    "Smart layouts with balcony or terrace, fully equipped kitchens for "
                    "international cooking, and Smart-TV."
                ),
            },
            {
                "badge": "Work ready",
                "text": (
                    "Fast WLAN and excellent conditions for communication and mobile "
                    "work in every apartment."
                ),
            },
            {
                "badge": "Move-in support",
                "text": (
                    "Registration support and a smooth arrival, including help with "
                    "official registration documents."
                ),
            },
        ],
    },
    "facilities": {
        "subtitle": "Welcome to Meri Boarding",
        "title": "Facilities & Services",
        "description": (
            "Fully furnished 1-3 room apartments across 3 locations in Stuttgart with a "
            "total of 256 apartments. Enjoy smart layouts, balconies or terraces, fully "
            "equipped kitchens for international cooking, Smart-TV, and fast WLAN."
        ),
        "stats": [
            {"label": "TOTAL APARTMENTS", "suffix": "furnished apartments"},
            {"label": "LOCATIONS", "suffix": "in Stuttgart"},
            {"label": "APARTMENT TYPES", "suffix": "1-3 room layouts"},
        ],
        "primaryImage": f"{_SELECTION}/_DSC6629.jpg",
        "secondaryImage": f"{_SELECTION}/_DSC6639.jpg",
        "statsNumbers": [256, 3, 3],
    },
    "gallery": {
        "subtitle": "Welcome",
        "title": "Experience Comfort, Elegance, and Exceptional Hospitality",
        "description": (
            "Welcome to our hotel, where comfort meets refined elegance in a setting "
            "designed for relaxation and unforgettable stays."
        ),
        "view": "View",
        "categories": [
            {"key": "rooms", "label": "Rooms"},
            {"key": "dining", "label": "Dining"},
            {"key": "facilities", "label": "Facilities"},
        ],
        "items": [
            {"image": f"{_SELECTION}/{name}", "category": category, "alt": ""}
            for name, category in (
                ("_DSC6699.jpg", "rooms"),
                ("_DSC6844.jpg", "dining"),
                ("_DSC6861.jpg", "facilities"),
                ("_DSC6754.jpg", "rooms"),
                ("_DSC6856-Bearbeitet.jpg", "dining"),
                ("_DSC6821-Bearbeitet.jpg", "rooms"),
                ("_DSC6716.jpg", "facilities"),
                ("_DSC6744.jpg", "rooms"),
                ("_DSC6709.jpg", "facilities"),
                ("_DSC6756.jpg", "rooms"),
                ("_DSC6846.jpg", "dining"),
                ("_DSC6726.jpg", "facilities"),
            )
        ],
    },
    "offers": {
        "subtitle": "Exclusive Deals",
        "title": "Latest Hotel Offers",
        "cards": [
            {
                "id": "offer-1",
                "badge": "20% OFF",
                "title": "Romantic Stay",
                "text": "20% Off Weekend Packages",
                "image": f"{_PHOTOS}/_DSC6629.jpg",
            },
            {
                "id": "offer-2",
                "badge": "30% OFF",
                "title": "Early Bird Deal",
                "text": "Save Up to 30% on Rooms",
                "image": f"{_PHOTOS}/_DSC6634.jpg",
            },
            {
                "id": "offer-3",
                "badge": "",
                "title": "Family Getaway",
                "text": "Kids Stay & Eat Free",
                "image": f"{_PHOTOS}/_DSC6639.jpg",
            },
        ],
    },
    "faq": {
        "subtitle": "Services",
        "title": "Everything You Need to Know About Staying With Us",
        "cta": "Request a quote now",
        "items": [
            {
                "title": "Vacant apartments are available for immediate move-in",
                "body": (
                    "Available apartments can be occupied immediately, with a smooth "
                    "move-in process and clear onboarding guidance."
                ),
            },
            {
                "title": "Registration confirmation and housing certificate",
                "body": (
                    "We provide the official registration confirmation and housing "
                    "certificate needed for local registration."
                ),
            },
            {
                "title": "Nameplate on the door at move-in",
                "body": (
                    "Your nameplate is prepared ahead of time, so your apartment is "
                    "ready from day one."
                ),
            },
            {
                "title": "Multicultural orientation, atmosphere, and specialization",
                "body": (
                    "A welcoming, multicultural atmosphere tailored to international "
                    "residents and project teams."
                ),
            },
            {
                "title": "Child-friendly and private atmosphere",
                "body": (
                    "Enjoy a child-friendly environment with privacy and quiet living "
                    "spaces for families."
                ),
            },
            {
                "title": "Visitors possible for only EUR 10 per person per month",
                "body": (
                    "Visitors are welcome for a monthly fee of EUR 10 per person, with "
                    "clear and transparent rules."
                ),
            },
            {
                "title": "Pets possible on request",
                "body": (
                    "Pets are possible on request, depending on apartment availability "
                    "and house rules."
                ),
            },
            {
                "title": "24-hour caretaker service",
                "body": "24/7 caretaker service ensures quick support whenever you need assistance.",
            },
            {
                "title": "Facility and cleaning service on request",
                "body": (
                    "Facility and cleaning services are available on request to keep "
                    "your stay effortless."
                ),
            },
            {
                "title": "Quiet living without service on request",
                "body": (
                    "If preferred, you can opt for disturbance-free living without "
                    "additional services."
                ),
            },
        ],
    },
    "videoCta": {"videoUrl": DEFAULT_VIDEO_URL},
}

DEFAULT_SERVICES_CONTENT: ServicesCmsContent = {
    "hero": {
        "subtitle": "Meri Boarding",
        "title": "Services",
        "home": "Home",
        "crumb": "Services",
        "backgroundImage": f"{_SELECTION}/_DSC6629.jpg",
    },
    "content": {
        "heroSubtitle": "Serviced apartments",
        "heroTitle": "Everything you need to live, work, and settle in quickly",
        "heroDescription": (
            "Meri Boarding provides fully equipped 1-3 room apartments across three "
            "locations in Stuttgart. In Hildesheim, about 30 minutes south of Hannover, "
            "guests can also stay in smaller buildings with the same serviced-apartment feel."
        ),
        "ctaAvailability": "Request availability",
        "ctaContact": "Contact us",
        "stats": [
            {"label": "Total apartments", "value": "256+", "note": "Across 3 locations in Stuttgart"},
            {"label": "Apartment layouts", "value": "1-3 rooms", "note": "Smart, fully equipped layouts"},
            {"label": "Move-in ready", "value": "Available now", "note": "Immediate occupancy is possible"},
        ],
        "statsImage": f"{_SELECTION}/_DSC6639.jpg",
        "essentialsSubtitle": "Included in every stay",
        "essentialsTitle": "Apartment essentials, ready from day one",
        "highlights": [
            {
                "icon": "fa fa-home",
                "title": "Furnished living rooms",
                "description": (
                    "High-quality furniture, a modern Smart TV with satellite channels, "
                    "and a sofa that converts into a bed."
                ),
            },
            {
                "icon": "fa fa-bed",
                "title": "Restful bedrooms",
                "description": (
                    "Large double beds with quality mattresses, built-in wardrobes, and "
                    "optional extra beds. Bedding is provided."
                ),
            },
            {
                "icon": "fa fa-cutlery",
                "title": "International-ready kitchens",
                "description": (
                    "Fully equipped kitchens with dishwasher, coffee machine, microwave, "
                    "rice cooker, and Chapati board."
                ),
            },
            {
                "icon": "fa fa-coffee",
                "title": "Dining essentials",
                "description": "Complete sets of dishes, cutlery, and glasses for everyday meals and hosting.",
            },
            {
                "icon": "fa fa-sun-o",
                "title": "Balcony or terrace",
                "description": "Every apartment includes a furnished balcony or terrace to relax outdoors.",
            },
            {
                "icon": "fa fa-wifi",
                "title": "Connectivity",
                "description": (
                    "Fast, free WLAN and DSL plus a private phone line with flat-rate "
                    "calls to German landlines."
                ),
            },
            {
                "icon": "fa fa-refresh",
                "title": "Laundry options",
                "description": "A washing machine in the bathroom or shared laundry with washer and dryer.",
            },
            {
                "icon": "fa fa-child",
                "title": "Family & mobility",
                "description": (
                    "Playground, baby and child beds available, plus parking or "
                    "underground garage on request."
                ),
            },
        ],
        "supportSubtitle": "Resident support",
        "supportTitle": "Services that make moving simple",
        "supportDescription": (
            "From registration support to on-request services, Meri Boarding makes every "
            "stay smooth for individuals, families, and corporate guests."
        ),
        "ctaStart": "Start your stay",
        "supportList": [
            "Move-in ready apartments with immediate availability.",
            "Registration support with confirmation documents for residents.",
            "Name door sign prepared on arrival.",
            "24-hour caretaker service on site.",
            "Facility and cleaning services available on request.",
            "Option for disturbance-free living without additional services.",
            "Visitor access can be arranged and pets are welcome on request.",
            "Multicultural, child-friendly, private living atmosphere.",
        ],
    },
}

DEFAULT_AMENITIES_CONTENT: AmenitiesCmsContent = {
    "hero": {
        "subtitle": "Meri Boarding",
        "title": "Amenities",
        "crumb": "Amenities",
        "home": "Home",
        "backgroundImage": f"{_SELECTION}/_DSC6639.jpg",
    },
    "content": {
        "layoutSubtitle": "Layout options",
        "layoutTitle": "Choose the layout that fits your stay",
        "layoutDesc": "From compact studios to spacious multi-room apartments.",
        "layoutOptions": [
            {
                "title": "Studio / 1-Room",
                "icon": "fa fa-square-o",
                "description": "Open-plan layouts that keep everything close and practical.",
                "highlights": ["Living and sleeping in one space", "Compact dining and storage"],
            },
            {
                "title": "2-Room",
                "icon": "fa fa-columns",
                "description": "Separate sleeping area for extra privacy and comfort.",
                "highlights": ["Distinct living and bedroom zones", "Ideal for couples or remote work"],
            },
            {
                "title": "3-Room",
                "icon": "fa fa-th-large",
                "description": "More space for families, longer stays, or sharing.",
                "highlights": ["Extra room for guests or a workspace", "Great for longer stays"],
            },
        ],
        "amenitiesSubtitle": "All amenities",
        "amenitiesTitle": "Everything included for everyday living",
        "toggleLabel": "View options",
        "cardView": "Card view",
        "listView": "List view",
        "switchHelp": "Switch between card and list views to scan details your way.",
        "includedTitle": "Included in your stay",
        "request": "Request availability",
    },
    "data": {
        "cards": [
            {
                "title": "Living Room",
                "icon": "fa fa-home",
                "image": f"{_SELECTION}/_DSC6699.jpg",
                "description": (
                    "Quality furnishings create a relaxed atmosphere in every apartment, "
                    "with space to unwind."
                ),
                "highlights": ["Smart TV with satellite channels", "Sofa converts into an extra bed"],
            },
            {
                "title": "Bedroom",
                "icon": "fa fa-bed",
                "image": f"{_SELECTION}/_DSC6744.jpg",
                "description": (
                    "Large double beds with quality mattresses and built-in wardrobes "
                    "keep things comfortable and tidy."
                ),
                "highlights": [
                    "Extra beds available for adults or children",
                    "Bedding provided and refreshed on request",
                ],
            },
            {
                "title": "Kitchen",
                "icon": "fa fa-cutlery",
                "image": f"{_SELECTION}/_DSC6754.jpg",
                "description": (
                    "Fully equipped kitchens for European and international cooking, "
                    "ready for everyday use."
                ),
                "highlights": [
                    "Dishwasher, coffee machine, microwave, rice cooker",
                    "Chapati board and a shopping trolley for groceries",
                ],
            },
            {
                "title": "Dining Area",
                "icon": "fa fa-coffee",
                "image": f"{_SELECTION}/_DSC6756.jpg",
                "description": "Complete dining setup for daily meals and shared moments.",
                "highlights": ["Full set of tableware, cutlery, and glasses"],
            },
            {
                "title": "Balcony / Terrace",
                "icon": "fa fa-sun-o",
                "image": f"{_SELECTION}/_DSC6821-Bearbeitet.jpg",
                "description": (
                    "Every apartment includes a furnished balcony or terrace for "
                    "fresh-air breaks."
                ),
                "highlights": ["Plenty of space to relax outdoors"],
            },
            {
                "title": "Connectivity",
                "icon": "fa fa-wifi",
                "image": f"{_SELECTION}/_DSC6844.jpg",
                "description": "Stay connected with fast, reliable internet and a private phone line.",
                "highlights": ["Free WiFi and DSL", "Phone line with flat rate to German landlines"],
            },
            {
                "title": "For Little Guests",
                "icon": "fa fa-child",
                "image": f"{_SELECTION}/_DSC6846.jpg",
                "description": "Family-friendly touches make traveling with kids easy and comfortable.",
                "highlights": [
                    "Play area and playground on site",
                    "Baby, kids, and extra beds bookable anytime",
                ],
            },
            {
                "title": "Parking / Underground Garage",
                "icon": "fa fa-car",
                "image": f"{_SELECTION}/_DSC6856-Bearbeitet.jpg",
                "description": (
                    "Parking options are available on request, with added bike "
                    "facilities in some locations."
                ),
                "highlights": [
                    "Parking or underground spaces on request",
                    "Bicycle parking or storage where available",
                ],
            },
        ],
        "overviewItems": [
            "Washing machine in the bathroom or shared laundry room with dryer",
            "Heat-resistant blackout curtains",
            "Playroom with table tennis table",
            "Fully furnished apartments with quality furniture",
        ],
    },
}

DEFAULT_CONTACT_CONTENT: ContactCmsContent = {
    "hero": {
        "subtitle": "Enjoy Your Stay",
        "title": "Contact",
        "crumb": "Contact",
        "home": "Home",
        "backgroundImage": f"{_SELECTION}/_DSC6629.jpg",
    },
    "details": {
        "subtitle": "Write a Message",
        "title": "Get In Touch",
        "description": (
            "Have a question, suggestion, or just want to say hi? We are here and happy "
            "to hear from you! Office hours are Monday to Friday, 08:00-12:00 and "
            "13:00-17:00. Weekend by appointment."
        ),
        "items": [
            {"icon": "icofont-location-pin", "title": "Address", "value": "Flamingoweg 70\nD-70378 Stuttgart"},
            {"icon": "icofont-envelope", "title": "Email", "value": "info@meri-boarding.de"},
            {"icon": "icofont-phone", "title": "Phone", "value": "+49 (0) 711 54 89 84 - 0"},
            {"icon": "icofont-brand-whatsapp", "title": "WhatsApp", "value": "+49 (0) 152 06419253"},
        ],
        "socials": [
            {"icon": "fa-brands fa-instagram", "label": "Instagram", "url": "https://www.instagram.com/"},
            {"icon": "fa-brands fa-linkedin-in", "label": "LinkedIn", "url": "https://www.linkedin.com/"},
        ],
    },
    "form": {
        "action": "https://meri-boarding.de/boarding-booking.php",
        "name": "Name",
        "email": "Email",
        "phone": "Phone",
        "message": "Message",
        "send": "Send Message",
        "success": (
            "Your message has been sent successfully. Refresh this page if you want to "
            "send more messages."
        ),
        "error": "Sorry there was an error sending your form.",
        "namePlaceholder": "Your Name",
        "emailPlaceholder": "Your Email",
        "phonePlaceholder": "Your Phone",
        "messagePlaceholder": "Your Message",
    },
}

DEFAULT_RESERVATION_CONTENT: ReservationCmsContent = {
    "hero": {
        "subtitle": "Plan Your Stay",
        "title": "Reservation",
        "description": (
            "Short stays can be reserved online. For stays longer than 1 month or annual "
            "allocations, our team prepares a tailored offer."
        ),
        "backgroundImage": f"{_SELECTION}/_DSC6629.jpg",
    },
    "crumb": {"home": "Home", "current": "Reservation"},
    "shortStay": {
        "subtitle": "Short stays (up to 30 nights)",
        "title": "Instant reservation",
        "description": (
            "Ideal for business trips, short-term projects, or temporary housing. Choose "
            "your dates and request availability."
        ),
        "helper": "For stays longer than 30 nights, please use the long-stay inquiry below.",
    },
    "form": {
        "action": "#",
        "checkIn": "Check In",
        "checkOut": "Check Out",
        "boarding": "Boarding House",
        "select": "Please select",
        "rooms": "Rooms",
        "guests": "Guests",
        "availability": "Check Availability",
        "boardingOptions": ["Flamingo", "Europaplatz", "Hildesheim"],
        "roomOptions": ["1", "2", "3", "4", "5"],
        "guestOptions": ["1", "2", "3", "4", "5", "6"],
    },
    "longStay": {
        "title": "Long-term & corporate stays",
        "description": (
            "For 1+ month stays, annual allocations, or corporate partnerships (employees "
            "and students), we provide tailored offers, fixed rates, and block bookings."
        ),
        "bullets": [
            "Dedicated account support for companies and institutions",
            "Flexible move-in dates and custom invoicing",
            "Optional services and quiet-living packages",
        ],
        "ctaQuote": "Request long-stay quote",
        "ctaContact": "Contact the team",
    },
    "help": {
        "title": "Need help?",
        "description": (
            "Our reservation team helps with availability, invoicing, and customized "
            "agreements for longer stays."
        ),
        "hoursTitle": "Office hours",
        "hoursDay": "Monday - Friday",
        "contacts": [
            {"icon": "fa fa-phone", "value": "+49 (0) 711 54 89 84 - 0"},
            {"icon": "fa fa-whatsapp", "value": "+49 (0) 152 06419253"},
            {"icon": "fa fa-envelope", "value": "info@meri-boarding.de"},
        ],
        "hours": ["08:00 - 12:00", "13:00 - 17:00"],
    },
    "why": {
        "title": "Why companies book with us",
        "bullets": [
            "Reliable capacity for project teams and interns",
            "Furnished apartments ready for immediate move-in",
            "Custom agreements for long-term housing",
        ],
    },
    "inquiry": {
        "action": "https://meri-boarding.de/boarding-booking.php",
        "subtitle": "Non-binding booking inquiry",
        "title": "Request a Quote",
        "firstName": "First Name",
        "lastName": "Last Name",
        "company": "Company (for business requests)",
        "email": "Email",
        "phone": "Phone",
        "purpose": "Purpose of Stay",
        "nationality": "Nationality",
        "guests": "Number of Guests",
        "rooms": "Number of Rooms",
        "boarding": "Boarding House",
        "moveIn": "Move-in Date",
        "message": "Your Message",
        "select": "Please select",
        "send": "Send Request",
        "policy": (
            "* By submitting this form, you agree that we may use your data to process "
            "your request. Information about data protection can be found"
        ),
        "policyLink": "here",
        "moveInPlaceholder": "mm/dd/yyyy",
        "stayPurposes": [
            {"value": purpose, "label": purpose}
            for purpose in ("Business", "Private", "Project", "Relocation", "Other")
        ],
        "boardingOptions": ["Flamingo", "Europaplatz", "Hildesheim"],
        "roomOptions": ["1", "2", "3"],
    },
}

_GENERIC_ROOMS_CARD_TITLES = {"en": "Card", "de": "Karte", "tr": "Kart"}

_GENERIC_ROOMS_CARD_DESCRIPTIONS = {
    "en": "Update this card title and description from admin panel.",
    "de": "Aktualisieren Sie Titel und Beschreibung dieser Karte im Admin-Panel.",
    "tr": "Bu kartin basligini ve aciklamasini admin panelden guncelleyin.",
}

_GENERIC_ROOMS_CARD_IMAGES = (
    f"{_SELECTION}/_DSC6699.jpg",
    f"{_SELECTION}/_DSC6744.jpg",
    f"{_SELECTION}/_DSC6754.jpg",
    f"{_SELECTION}/_DSC6756.jpg",
)

# Translated Home copy; anything missing here keeps the English default.
_LOCALIZED_HOME_COPY: dict[str, dict[str, Any]] = {
    "de": {
        "hero": {
            "titleLead": "In Stuttgart",
            "titleHighlight": "leben, wohnen und arbeiten",
            "titleTail": "an einem Ort",
            "description": (
                "256 Apartments an 3 Standorten: 1-3 Zimmer, voll möbliert und ideal für "
                "kurze oder lange Aufenthalte. Smart-TV, schnelles WLAN und voll "
                "ausgestattete Küchen für einen komfortablen Aufenthalt."
            ),
            "ctaLocations": "Standorte ansehen",
            "ctaQuote": "Jetzt Angebot anfordern",
        },
        "rooms": {
            "subtitle": "Meri Boarding Ausstattung",
            "title": "Apartment-Ausstattung",
            "description": (
                "Voll möblierte Apartments mit durchdachten Details für Alltag, Arbeit "
                "und Familienaufenthalte."
            ),
            "allAmenities": "Alle Ausstattungen ansehen",
            "request": "Verfügbarkeit anfragen",
        },
        "testimonials": {
            "apartments": "Apartments",
            "locations": "3 Standorte in Stuttgart",
            "slides": [
                {
                    "badge": "Voll möbliert",
                    "text": (
                        "1-3 Zimmer Apartments zum Wohnen und Arbeiten auf Zeit, an drei "
                        "Standorten in Stuttgart."
                    ),
                },
                {
                    "badge": "Komfort zuerst",
                    "text": (
                        "Clevere Grundrisse mit Balkon oder Terrasse, voll ausgestattete "
                        "Küchen und Smart-TV."
                    ),
                },
                {
                    "badge": "Bereit zum Arbeiten",
                    "text": "Schnelles WLAN und beste Bedingungen für mobiles Arbeiten.",
                },
                {
                    "badge": "Einzugshilfe",
                    "text": "Unterstützung bei der Anmeldung und ein reibungsloser Einzug.",
                },
            ],
        },
        "facilities": {
            "subtitle": "Willkommen bei Meri Boarding",
            "title": "Ausstattung & Services",
            "description": (
                "Voll möblierte 1-3 Zimmer Apartments an 3 Standorten in Stuttgart mit "
                "insgesamt 256 Apartments. Balkon oder Terrasse, voll ausgestattete "
                "Küchen, Smart-TV und schnelles WLAN."
            ),
            "stats": [
                {"label": "APARTMENTS GESAMT", "suffix": "möblierte Apartments"},
                {"label": "STANDORTE", "suffix": "in Stuttgart"},
                {"label": "APARTMENTTYPEN", "suffix": "1-3 Zimmer Grundrisse"},
            ],
        },
    },
    "tr": {
        "hero": {
            "titleLead": "Stuttgart'ta",
            "titleHighlight": "yaşayın, konaklayın ve çalışın",
            "titleTail": "tek bir yerde",
            "description": (
                "3 lokasyonda 256 daire: 1-3 odalı, tamamen mobilyalı ve kısa ya da uzun "
                "konaklamalar için ideal. Smart TV, hızlı Wi-Fi ve tam donanımlı mutfaklar."
            ),
            "ctaLocations": "Lokasyonları Gör",
            "ctaQuote": "Hemen Teklif Alın",
        },
        "rooms": {
            "subtitle": "Meri Boarding Olanakları",
            "title": "Daire Olanakları",
            "description": (
                "Günlük yaşam, iş ve aile konaklamaları için özenli detaylara sahip, "
                "tamamen mobilyalı daireler."
            ),
            "allAmenities": "Tüm olanakları gör",
            "request": "Müsaitlik sorun",
        },
        "testimonials": {
            "apartments": "Daire",
            "locations": "Stuttgart'ta 3 lokasyon",
            "slides": [
                {
                    "badge": "Tamamen mobilyalı",
                    "text": "Stuttgart'taki üç lokasyonda yaşamak ve çalışmak için 1-3 odalı daireler.",
                },
                {
                    "badge": "Önce konfor",
                    "text": "Balkon veya teraslı akıllı planlar, tam donanımlı mutfaklar ve Smart TV.",
                },
                {
                    "badge": "Çalışmaya hazır",
                    "text": "Her dairede hızlı WLAN ve mobil çalışma için ideal koşullar.",
                },
                {
                    "badge": "Taşınma desteği",
                    "text": "Resmi kayıt belgeleri dahil kolay bir giriş süreci.",
                },
            ],
        },
        "facilities": {
            "subtitle": "Meri Boarding'e hoş geldiniz",
            "title": "Olanaklar ve Hizmetler",
            "description": (
                "Stuttgart'ta 3 lokasyonda toplam 256 adet tamamen mobilyalı 1-3 odalı "
                "daire. Balkon veya teras, tam donanımlı mutfaklar, Smart TV ve hızlı WLAN."
            ),
            "stats": [
                {"label": "TOPLAM DAİRE", "suffix": "mobilyalı daire"},
                {"label": "LOKASYON", "suffix": "Stuttgart'ta"},
                {"label": "DAİRE TİPLERİ", "suffix": "1-3 oda planları"},
            ],
        },
    },
}


def get_localized_generic_rooms_cards(locale: str) -> list[RoomCard]:
    """Return the four placeholder room cards translated for a locale."""

    resolved = parse_locale(locale)
    title = _GENERIC_ROOMS_CARD_TITLES[resolved]
    description = _GENERIC_ROOMS_CARD_DESCRIPTIONS[resolved]
    return [
        {
            "title": f"{title} {index}",
            "icon": "fa fa-home",
            "image": image,
            "description": description,
            "highlights": [],
        }
        for index, image in enumerate(_GENERIC_ROOMS_CARD_IMAGES, start=1)
    ]


@lru_cache(maxsize=None)
def _cached_home_default(locale: str) -> HomeCmsContent:
    content = clone_document(DEFAULT_HOME_CONTENT)
    content["rooms"]["cards"] = get_localized_generic_rooms_cards(locale)
    for section, fields in _LOCALIZED_HOME_COPY.get(locale, {}).items():
        content[section].update(clone_document(fields))
    return content


def get_localized_default_home(locale: str) -> HomeCmsContent:
    """Return a fresh copy of the Home default for a locale."""

    return clone_document(_cached_home_default(parse_locale(locale)))


def get_localized_default_services(locale: str) -> ServicesCmsContent:
    """Return a fresh copy of the Services default for a locale."""

    _ = locale
    return clone_document(DEFAULT_SERVICES_CONTENT)


def get_localized_default_amenities(locale: str) -> AmenitiesCmsContent:
    """Return a fresh copy of the Amenities default for a locale."""

    _ = locale
    return clone_document(DEFAULT_AMENITIES_CONTENT)


def get_localized_default_contact(locale: str) -> ContactCmsContent:
    """Return a fresh copy of the Contact default for a locale."""

    _ = locale
    return clone_document(DEFAULT_CONTACT_CONTENT)


def get_localized_default_reservation(locale: str) -> ReservationCmsContent:
    """Return a fresh copy of the Reservation default for a locale."""

    _ = locale
    return clone_document(DEFAULT_RESERVATION_CONTENT)


_DEFAULT_FACTORIES: dict[str, Callable[[str], Any]] = {
    HOME_CONTENT_KEY: get_localized_default_home,
    SERVICES_CONTENT_KEY: get_localized_default_services,
    AMENITIES_CONTENT_KEY: get_localized_default_amenities,
    CONTACT_CONTENT_KEY: get_localized_default_contact,
    RESERVATION_CONTENT_KEY: get_localized_default_reservation,
}


def get_localized_default(content_key: str, locale: str) -> dict[str, Any]:
    """Return the localized default document for a content key.

    Raises:
        UnknownContentKeyError: If the content key is not supported.
    """

    factory = _DEFAULT_FACTORIES.get(content_key)
    if factory is None:
        raise UnknownContentKeyError(content_key)
    return factory(locale)
