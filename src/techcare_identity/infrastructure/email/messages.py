"""Plain-text notification subjects and bodies."""

CUSTOMER_WELCOME_SUBJECT = "Welcome to TechCare"

CUSTOMER_WELCOME_TEXT = """Welcome to TechCare, {full_name}!

Thank you for signing up with TechCare. We are excited to have you on board.
Get started by exploring our platform and services.

Best regards,
TechCare Team
"""

TECHNICIAN_APPLICATION_SUBJECT = "Welcome to TechCare - Technician Application Received"

TECHNICIAN_APPLICATION_TEXT = """Dear {full_name},

Thank you for applying to join TechCare as a {specialization} technician.

Your application and documents have been received and are now under review
by our team. You will receive another email with your login credentials as
soon as your application has been approved.

Best regards,
TechCare Team
"""

TECHNICIAN_APPROVED_SUBJECT = "TechCare - Account Approved! Your Login Credentials"

TECHNICIAN_APPROVED_TEXT = """Dear {full_name},

Congratulations! Your technician application has been approved.

Your login credentials:
  Email:    {email}
  Password: {password}

Please log in and change this password as soon as possible.
This is the only time the password will be sent to you.

Best regards,
TechCare Team
"""

TECHNICIAN_REJECTED_SUBJECT = "TechCare - Application Status Update"

TECHNICIAN_REJECTED_TEXT = """Dear {full_name},

Thank you for your interest in joining TechCare as a technician.
After careful review, we are unable to approve your application at this time.
{reason_block}
What you can do:
  - Review the feedback provided above
  - Update your qualifications or documents
  - Reapply when you meet the requirements

Best regards,
TechCare Team
"""

TECHNICIAN_REJECTED_REASON = "\nReason: {reason}\n"

PASSWORD_RESET_SUBJECT = "TechCare - Password Reset Request"

PASSWORD_RESET_TEXT = """Dear {full_name},

We received a request to reset the password of your TechCare account.

Open the link below to choose a new password (valid for {valid_hours} hours):
{reset_link}

If the link doesn't work, paste this token on the password reset page:
{token}

If you didn't request this, you can safely ignore this email.

Best regards,
TechCare Team
"""

PASSWORD_RESET_SUCCESS_SUBJECT = "TechCare - Password Reset Successful"

PASSWORD_RESET_SUCCESS_TEXT = """Dear {full_name},

Your TechCare password has been reset. You can now log in with your new
password.

If you did not make this change, contact support immediately.

Best regards,
TechCare Team
"""


def technician_rejected_text(full_name: str, reason: str | None) -> str:
    reason_block = (
        TECHNICIAN_REJECTED_REASON.format(reason=reason.strip())
        if reason and reason.strip()
        else ""
    )
    return TECHNICIAN_REJECTED_TEXT.format(
        full_name=full_name,
        reason_block=reason_block,
    )
