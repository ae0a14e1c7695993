from dataclasses import dataclass

from src.notifications.dtos import NotificationContent


@dataclass
class NotificationTemplates:
    WELCOME_SUBJECT = "Welcome! {email}"
    WELCOME_TEXT = "Thank you for signing up!"
    WELCOME_HTML = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #ea580c;">Welcome!</h1>
        </div>

        <p>Hi {email},</p>

        <p>Thank you for signing up!</p>

        <p>You will receive your event invitations at this address.</p>
    </body>
    </html>
    """

    RSVP_CONFIRMATION_SUBJECT = "Your RSVP for {event_name}"
    RSVP_CONFIRMATION_HTML = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #ea580c;">Thank You!</h1>
        </div>

        <p>Dear {to_name},</p>

        <p>We have recorded your response to the invitation.</p>

        <div style="background-color: #fff7ed; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h2 style="color: #1e3a8a; margin-top: 0;">{event_name}</h2>
            <p><strong>Date:</strong> {event_date}</p>
            <p><strong>Location:</strong> {event_location}</p>
            <p><strong>Your Response:</strong> {response_status}</p>
        </div>
    </body>
    </html>
    """

    RSVP_CONFIRMATION_TEXT = """
    Dear {to_name},

    We have recorded your response to the invitation.

    {event_name}
    - Date: {event_date}
    - Location: {event_location}
    - Your Response: {response_status}
    """

    @classmethod
    def welcome(cls, email: str) -> NotificationContent:
        """Welcome notification sent on registration. SMS channels only use the body."""
        return NotificationContent(
            subject=cls.WELCOME_SUBJECT,
            body=cls.WELCOME_TEXT,
            html_body=cls.WELCOME_HTML,
            template_variables={"email": email},
        )

    @classmethod
    def rsvp_confirmation(
        cls,
        to_name: str,
        event_name: str,
        event_date: str,
        event_location: str,
        response_status: str,
    ) -> NotificationContent:
        return NotificationContent(
            subject=cls.RSVP_CONFIRMATION_SUBJECT,
            body=cls.RSVP_CONFIRMATION_TEXT,
            html_body=cls.RSVP_CONFIRMATION_HTML,
            template_variables={
                "to_name": to_name,
                "event_name": event_name,
                "event_date": event_date,
                "event_location": event_location,
                "response_status": response_status,
            },
        )
