"""Typed document shapes for locale-scoped CMS content.

Responsibilities:
- Name the supported locales, content keys, and fixed key sets.
- Describe persisted document shapes as `TypedDict` declarations.

Documents stay plain JSON-compatible dictionaries with camelCase keys because
that is the shape written to storage and returned to callers. The declarations
below exist for static typing only.

Key types:
- `HomeCmsContent`, `ServicesCmsContent`, `AmenitiesCmsContent`,
  `ContactCmsContent`, `ReservationCmsContent`, and `HotelLocaleContent`.
"""

from __future__ import annotations

from typing import Literal, TypedDict


ContentLocale = Literal["en", "de", "tr"]

SUPPORTED_LOCALES: tuple[ContentLocale, ...] = ("en", "de", "tr")
DEFAULT_LOCALE: ContentLocale = "en"

HOME_CONTENT_KEY = "page.home"
SERVICES_CONTENT_KEY = "page.services"
AMENITIES_CONTENT_KEY = "page.amenities"
CONTACT_CONTENT_KEY = "page.contact"
RESERVATION_CONTENT_KEY = "page.reservation"

CONTENT_KEYS: tuple[str, ...] = (
    HOME_CONTENT_KEY,
    SERVICES_CONTENT_KEY,
    AMENITIES_CONTENT_KEY,
    CONTACT_CONTENT_KEY,
    RESERVATION_CONTENT_KEY,
)

HOME_SECTION_KEYS: tuple[str, ...] = (
    "hero",
    "bookingPartners",
    "rooms",
    "testimonials",
    "facilities",
    "gallery",
    "offers",
    "faq",
)

HOTEL_GALLERY_CATEGORIES: tuple[str, ...] = ("rooms", "dining", "facilities", "other")


class HomeSectionState(TypedDict):
    enabled: bool
    order: int


class HomeHeroSlide(TypedDict):
    image: str
    position: str


class HomeBookingPartner(TypedDict):
    name: str
    logo: str
    url: str
    description: str


class BookingPartnersVisibility(TypedDict):
    hotelsPage: bool
    hotelDetailPage: bool


class HomeHero(TypedDict):
    titleLead: str
    titleHighlight: str
    titleTail: str
    description: str
    ctaLocations: str
    ctaLocationsHref: str
    ctaQuote: str
    ctaQuoteHref: str
    bookingPartnersTitle: str
    bookingPartnersDescription: str
    bookingPartnersVisibility: BookingPartnersVisibility
    bookingPartners: list[HomeBookingPartner]
    slides: list[HomeHeroSlide]


class RoomCard(TypedDict):
    title: str
    icon: str
    image: str
    description: str
    highlights: list[str]


class HomeRooms(TypedDict):
    subtitle: str
    title: str
    description: str
    allAmenities: str
    allAmenitiesHref: str
    request: str
    requestHref: str
    cards: list[RoomCard]


class TestimonialSlide(TypedDict):
    badge: str
    text: str


class HomeTestimonials(TypedDict):
    apartmentsCount: float
    backgroundImage: str
    apartments: str
    locations: str
    slides: list[TestimonialSlide]


class FacilityStat(TypedDict):
    label: str
    suffix: str


class HomeFacilities(TypedDict):
    subtitle: str
    title: str
    description: str
    stats: list[FacilityStat]
    primaryImage: str
    secondaryImage: str
    statsNumbers: list[float]


class GalleryCategory(TypedDict):
    key: str
    label: str


class GalleryItem(TypedDict):
    image: str
    category: str
    alt: str


class HomeGallery(TypedDict):
    subtitle: str
    title: str
    description: str
    view: str
    categories: list[GalleryCategory]
    items: list[GalleryItem]


class OfferCard(TypedDict):
    id: str
    badge: str
    title: str
    text: str
    image: str


class HomeOffers(TypedDict):
    subtitle: str
    title: str
    cards: list[OfferCard]


class FaqItem(TypedDict):
    title: str
    body: str


class HomeFaq(TypedDict):
    subtitle: str
    title: str
    cta: str
    items: list[FaqItem]


class VideoCta(TypedDict):
    videoUrl: str


class HomeCmsContent(TypedDict):
    sections: dict[str, HomeSectionState]
    hero: HomeHero
    rooms: HomeRooms
    testimonials: HomeTestimonials
    facilities: HomeFacilities
    gallery: HomeGallery
    offers: HomeOffers
    faq: HomeFaq
    videoCta: VideoCta


class PageHero(TypedDict):
    subtitle: str
    title: str
    home: str
    crumb: str
    backgroundImage: str


class ServicesStat(TypedDict):
    label: str
    value: str
    note: str


class ServicesHighlight(TypedDict):
    icon: str
    title: str
    description: str


class ServicesBody(TypedDict):
    heroSubtitle: str
    heroTitle: str
    heroDescription: str
    ctaAvailability: str
    ctaContact: str
    stats: list[ServicesStat]
    statsImage: str
    essentialsSubtitle: str
    essentialsTitle: str
    highlights: list[ServicesHighlight]
    supportSubtitle: str
    supportTitle: str
    supportDescription: str
    ctaStart: str
    supportList: list[str]


class ServicesCmsContent(TypedDict):
    hero: PageHero
    content: ServicesBody


class AmenitiesLayoutOption(TypedDict):
    title: str
    icon: str
    description: str
    highlights: list[str]


class AmenitiesBody(TypedDict):
    layoutSubtitle: str
    layoutTitle: str
    layoutDesc: str
    layoutOptions: list[AmenitiesLayoutOption]
    amenitiesSubtitle: str
    amenitiesTitle: str
    toggleLabel: str
    cardView: str
    listView: str
    switchHelp: str
    includedTitle: str
    request: str


class AmenitiesCard(TypedDict):
    title: str
    icon: str
    image: str
    description: str
    highlights: list[str]


class AmenitiesData(TypedDict):
    cards: list[AmenitiesCard]
    overviewItems: list[str]


class AmenitiesCmsContent(TypedDict):
    hero: PageHero
    content: AmenitiesBody
    data: AmenitiesData


class ContactDetailItem(TypedDict):
    icon: str
    title: str
    value: str


class ContactSocialLink(TypedDict):
    icon: str
    label: str
    url: str


class ContactDetails(TypedDict):
    subtitle: str
    title: str
    description: str
    items: list[ContactDetailItem]
    socials: list[ContactSocialLink]


class ContactForm(TypedDict):
    action: str
    name: str
    email: str
    phone: str
    message: str
    send: str
    success: str
    error: str
    namePlaceholder: str
    emailPlaceholder: str
    phonePlaceholder: str
    messagePlaceholder: str


class ContactCmsContent(TypedDict):
    hero: PageHero
    details: ContactDetails
    form: ContactForm


class ReservationHero(TypedDict):
    subtitle: str
    title: str
    description: str
    backgroundImage: str


class ReservationCrumb(TypedDict):
    home: str
    current: str


class ReservationShortStay(TypedDict):
    subtitle: str
    title: str
    description: str
    helper: str


class ReservationForm(TypedDict):
    action: str
    checkIn: str
    checkOut: str
    boarding: str
    select: str
    rooms: str
    guests: str
    availability: str
    boardingOptions: list[str]
    roomOptions: list[str]
    guestOptions: list[str]


class ReservationLongStay(TypedDict):
    title: str
    description: str
    bullets: list[str]
    ctaQuote: str
    ctaContact: str


class ReservationHelpContact(TypedDict):
    icon: str
    value: str


class ReservationHelp(TypedDict):
    title: str
    description: str
    hoursTitle: str
    hoursDay: str
    contacts: list[ReservationHelpContact]
    hours: list[str]


class ReservationWhy(TypedDict):
    title: str
    bullets: list[str]


class ReservationInquiryPurpose(TypedDict):
    value: str
    label: str


class ReservationInquiry(TypedDict):
    action: str
    subtitle: str
    title: str
    firstName: str
    lastName: str
    company: str
    email: str
    phone: str
    purpose: str
    nationality: str
    guests: str
    rooms: str
    boarding: str
    moveIn: str
    message: str
    select: str
    send: str
    policy: str
    policyLink: str
    moveInPlaceholder: str
    stayPurposes: list[ReservationInquiryPurpose]
    boardingOptions: list[str]
    roomOptions: list[str]


class ReservationCmsContent(TypedDict):
    hero: ReservationHero
    crumb: ReservationCrumb
    shortStay: ReservationShortStay
    form: ReservationForm
    longStay: ReservationLongStay
    help: ReservationHelp
    why: ReservationWhy
    inquiry: ReservationInquiry


class HotelFact(TypedDict):
    text: str
    icon: str


class HotelGalleryImage(TypedDict):
    id: str
    url: str
    thumbnailUrl: str
    category: str
    alt: str
    sortOrder: float


class HotelGallerySection(TypedDict):
    title: str
    features: list[str]


class HotelGalleryMeta(TypedDict):
    sections: list[HotelGallerySection]


class HotelLocaleContent(TypedDict):
    locale: ContentLocale
    name: str
    location: str
    shortDescription: str
    facts: list[HotelFact]
    heroTitle: str
    heroSubtitle: str
    description: list[str]
    amenitiesTitle: str
    highlights: list[str]
    gallery: list[HotelGalleryImage]
    galleryMeta: dict[str, HotelGalleryMeta]
