"""Seed contacts used when a session starts without a data file."""
from recruit.services.address_book import AddressBook
from recruit.services.person import Address, Email, IdentityPolicy, Name, Person, Phone
from recruit.services.tags import Tags

SAMPLE_PERSONS = [
    ("Alex Yeoh", "87438807", "alexyeoh@example.com", "Blk 30 Geylang Street 29, #06-40", ["friends"]),
    ("Bernice Yu", "99272758", "berniceyu@example.com", "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
     ["colleagues", "friends"]),
    ("Charlotte Oliveiro", "93210283", "charlotte@example.com", "Blk 11 Ang Mo Kio Street 74, #11-04",
     ["neighbours"]),
    ("David Li", "91031282", "lidavid@example.com", "Blk 436 Serangoon Gardens Street 26, #16-43",
     ["family"]),
    ("Irfan Ibrahim", "92492021", "irfan@example.com", "Blk 47 Tampines Street 20, #17-35",
     ["classmates"]),
    ("Roy Balakrishnan", "92624417", "royb@example.com", "Blk 45 Aljunied Street 85, #11-31",
     ["colleagues"]),
]


def get_sample_persons() -> list[Person]:
    return [
        Person(Name(name), Phone(phone), Email(email), Address(address), Tags.from_strings(tags))
        for name, phone, email, address, tags in SAMPLE_PERSONS
    ]


def get_sample_address_book(identity: IdentityPolicy = IdentityPolicy.NAME) -> AddressBook:
    return AddressBook(get_sample_persons(), identity=identity)
