from app.models.domain import JourneyEstimate


def render_journey_summary(estimate: JourneyEstimate) -> str:
    """Plain-text journey layout used by the assistant's replies"""
    lines = [
        "📍 LOCATION DETAILS",
        f"Origin: {estimate.origin.address}",
        f"Destination: {estimate.destination.address}",
        "",
        "📏 DISTANCE & TIME",
        f"Distance: {estimate.distance_km:.2f} km",
        f"Driving Time: {estimate.driving_time}",
        f"Walking Time: {estimate.walking_time}",
        "",
        "🗺️ NAVIGATION",
        f"Google Maps: {estimate.navigation_link}",
        "",
        "🛡️ SAFETY TIPS",
    ]
    lines.extend(estimate.safety_tips)
    return "\n".join(lines)
