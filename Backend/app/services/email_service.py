"""
Mechanic Email Service

Builds the pre-filled message a user sends to their mechanic about a
trouble code. Only composes it; the user's own mail client sends it.
"""
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

from app.core.exceptions import MechanicEmailNotSet
from app.models.vehicle import VehicleSnapshot
from app.models.video import VideoResult


BODY_TEMPLATE = (
    "Hello. I am having some issues with my vehicle I hope you can help me with. "
    "I have a {vehicle} with a check engine light on. When I hook up my scanner to "
    "check the code I am receiving {code}. I did a little research on what could be "
    "causing the code and I either don't have the tools necessary to do the repair, "
    "am not comfortable doing the repair myself, or do not have the time to attempt "
    "the repair.\n\n"
    "If you could email me back so we can set up an appointment for me to come in so "
    "you can diagnose the issue and give me a quote on the repair it would be greatly "
    "appreciated."
)


@dataclass
class MechanicEmail:
    """Composed message ready for a mailto: link"""
    to: str
    subject: str
    body: str
    mailto_url: str


def compose_mechanic_email(
    mechanic_email: str,
    vehicle: VehicleSnapshot,
    code: str,
    videos: Optional[List[VideoResult]] = None
) -> MechanicEmail:
    """
    Compose the mechanic email for a vehicle and code.

    Videos the user marked helpful are listed under the message.

    Raises:
        MechanicEmailNotSet: No mechanic address on the profile
    """
    mechanic_email = (mechanic_email or "").strip()
    if not mechanic_email:
        raise MechanicEmailNotSet()

    code = (code or "").strip().upper()
    vehicle_name = " ".join(filter(None, [vehicle.year, vehicle.make, vehicle.model]))

    subject = f"Help needed with {vehicle_name} - Code {code}"
    body = BODY_TEMPLATE.format(vehicle=vehicle_name, code=code)

    helpful = [video for video in (videos or []) if video.rated and video.isHelpful]
    if helpful:
        links = "\n".join(
            f"- {video.title}: https://www.youtube.com/watch?v={video.id}" for video in helpful
        )
        body += f"\n\nVideos I found helpful:\n{links}"

    mailto_url = f"mailto:{mechanic_email}?subject={quote(subject, safe='')}&body={quote(body, safe='')}"

    return MechanicEmail(
        to=mechanic_email,
        subject=subject,
        body=body,
        mailto_url=mailto_url
    )
