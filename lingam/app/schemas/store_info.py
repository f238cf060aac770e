from pydantic import BaseModel


class StoreInfo(BaseModel):
    """Public contact details shown in the storefront footer and contact page."""
    name: str = "LINGAM Aabharanam"
    address: str = "Illinois, Chicago, USA"
    phone: str = "+1 (773) 490-3951"
    email: str = "lingamaabharanamllc@gmail.com"
    website: str = "www.lingamaabharanam.com"
    opening_hours: str = "Monday to Sunday (appointments only)"
