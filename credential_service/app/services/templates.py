"""
Notification templates.

HTML bodies are rendered with str.format; values are escaped by the caller.
"""

WELCOME_SUBJECT = "Your account has been created"

WELCOME_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px;">
        <h2 style="margin-top: 0;">Welcome, {username}</h2>
        <p>An account has been created for you.</p>
        <p>Username: <strong>{username}</strong></p>
        <p>Temporary password: <strong>{password}</strong></p>
        <p>Please sign in and change this password as soon as possible.</p>
    </div>
</body>
</html>
"""

PASSWORD_CHANGED_SUBJECT = "Your password has been changed"

PASSWORD_CHANGED_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px;">
        <h2 style="margin-top: 0;">Password changed</h2>
        <p>Hello {username}, the password for your account was changed.</p>
        <p>If you did not make this change, request a recovery code right away.</p>
    </div>
</body>
</html>
"""

RECOVERY_CODE_SUBJECT = "Password recovery code"

RECOVERY_CODE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px;">
        <h2 style="margin-top: 0;">Password recovery</h2>
        <p>Hello {username}, use the code below to reset your password.</p>
        <p style="font-size: 20px; letter-spacing: 2px;"><strong>{code}</strong></p>
        <p>The code is valid for {validity}.</p>
        <p style="color: #6b7280; font-size: 13px;">If you didn't request this, you can safely ignore this email.</p>
    </div>
</body>
</html>
"""
