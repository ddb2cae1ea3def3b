"""Text for reservation notifications."""
from autocheckin.domain.entities.reservation import Reservation


def format_time(value) -> str:
    return value.strftime("%b %d at %H:%M %Z").strip() if value else "an unknown time"


def format_reservation_created(reservation: Reservation, open_hours: int = 24) -> str:
    """
    Build the confirmation text sent when a reservation is ingested.
    
    Args:
        reservation: Stored reservation
        open_hours: How long before departure check-in opens
        
    Returns:
        Message text using WhatsApp *bold* markup
    """
    destination = reservation.arrival_city_name or "your destination"
    travelers = ", ".join(passenger.name for passenger in reservation.passengers)
    lines = [
        f"*Reservation {reservation.confirmation_number}*",
        f"Trip to {destination} departing {format_time(reservation.time)}.",
    ]
    if reservation.return_flights():
        lines.append(f"Returning {format_time(reservation.return_flights()[0].departure_time)}.")
    lines.append(
        f"We'll check in {travelers} automatically {open_hours} hours before "
        f"each outbound and return flight."
    )
    return "\n".join(lines)
