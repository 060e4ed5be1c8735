"""The dashboard document served by the portal.

The page is assembled once at import time and never changes afterwards, so every
response carries exactly the same bytes.
"""

from __future__ import annotations

from typing import Final

PAGE_TITLE: Final[str] = "Healthcare Management System"
CONTENT_TYPE: Final[str] = "text/html; charset=UTF-8"

# One entry per emitted line; blank-looking spacer lines keep their indentation.
_LINES: Final[tuple[str, ...]] = (
    "<!DOCTYPE html>",
    "<html>",
    "<head>",
    "    <title>Healthcare Management System</title>",
    "    <style>",
    "        * { margin: 0; padding: 0; box-sizing: border-box; }",
    "        body {",
    "            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;",
    "            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);",
    "            color: white;",
    "            min-height: 100vh;",
    "            padding: 20px;",
    "        }",
    "        .container {",
    "            max-width: 1200px;",
    "            margin: 0 auto;",
    "            text-align: center;",
    "        }",
    "        h1 {",
    "            font-size: 3em;",
    "            margin: 40px 0 20px;",
    "            text-shadow: 2px 2px 4px rgba(0,0,0,0.3);",
    "        }",
    "        .subtitle {",
    "            font-size: 1.5em;",
    "            margin-bottom: 40px;",
    "            opacity: 0.9;",
    "        }",
    "        .success-badge {",
    "            background: #4ade80;",
    "            color: white;",
    "            padding: 15px 30px;",
    "            border-radius: 50px;",
    "            display: inline-block;",
    "            font-size: 1.3em;",
    "            margin: 20px 0;",
    "            box-shadow: 0 4px 15px rgba(0,0,0,0.2);",
    "        }",
    "        .features {",
    "            display: grid;",
    "            grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));",
    "            gap: 20px;",
    "            margin: 40px 0;",
    "        }",
    "        .feature-card {",
    "            background: rgba(255,255,255,0.1);",
    "            padding: 30px;",
    "            border-radius: 15px;",
    "            backdrop-filter: blur(10px);",
    "            border: 1px solid rgba(255,255,255,0.2);",
    "            transition: transform 0.3s;",
    "        }",
    "        .feature-card:hover {",
    "            transform: translateY(-5px);",
    "        }",
    "        .feature-icon { font-size: 3em; margin-bottom: 15px; }",
    "        .feature-title { font-size: 1.3em; margin-bottom: 10px; font-weight: bold; }",
    "        .feature-desc { opacity: 0.9; line-height: 1.6; }",
    "        .pipeline-status {",
    "            background: rgba(74,222,128,0.2);",
    "            padding: 20px;",
    "            border-radius: 10px;",
    "            margin: 40px 0;",
    "            border: 2px solid #4ade80;",
    "        }",
    "        .footer {",
    "            margin-top: 60px;",
    "            opacity: 0.8;",
    "            font-size: 0.9em;",
    "        }",
    "    </style>",
    "</head>",
    "<body>",
    "    <div class='container'>",
    "        <h1>🏥 Healthcare Management System</h1>",
    "        <div class='subtitle'>Complete CI/CD Pipeline - Enterprise Project</div>",
    "        <div class='success-badge'>✅ Application Successfully Deployed on Tomcat Server!</div>",
    "        ",
    "        <div class='features'>",
    "            <div class='feature-card'>",
    "                <div class='feature-icon'>👤</div>",
    "                <div class='feature-title'>Patient Registration</div>",
    "                <div class='feature-desc'>Comprehensive patient information management system</div>",
    "            </div>",
    "            <div class='feature-card'>",
    "                <div class='feature-icon'>📅</div>",
    "                <div class='feature-title'>Appointment Scheduling</div>",
    "                <div class='feature-desc'>Smart doctor appointment booking and management</div>",
    "            </div>",
    "            <div class='feature-card'>",
    "                <div class='feature-icon'>📋</div>",
    "                <div class='feature-title'>Medical History</div>",
    "                <div class='feature-desc'>Complete medical history tracking and retrieval</div>",
    "            </div>",
    "            <div class='feature-card'>",
    "                <div class='feature-icon'>💊</div>",
    "                <div class='feature-title'>Prescription Management</div>",
    "                <div class='feature-desc'>Digital prescription recording and tracking</div>",
    "            </div>",
    "            <div class='feature-card'>",
    "                <div class='feature-icon'>📊</div>",
    "                <div class='feature-title'>Report Generation</div>",
    "                <div class='feature-desc'>Automated medical report generation system</div>",
    "            </div>",
    "            <div class='feature-card'>",
    "                <div class='feature-icon'>🔒</div>",
    "                <div class='feature-title'>Security & Privacy</div>",
    "                <div class='feature-desc'>HIPAA compliant data protection and encryption</div>",
    "            </div>",
    "        </div>",
    "        ",
    "        <div class='pipeline-status'>",
    "            <div style='font-size: 1.5em; margin-bottom: 10px;'>Pipeline Status: ✅ All stages passed</div>",
    "            <div>Built with Jenkins | Quality checked by SonarQube | Stored in Nexus</div>",
    "        </div>",
    "        ",
    "        <div class='footer'>",
    "            <p>© 2025 Healthcare Management System</p>",
    "            <p>Deployed via CI/CD Pipeline: Git → Jenkins → SonarQube → Nexus → Tomcat</p>",
    "        </div>",
    "    </div>",
    "</body>",
    "</html>",
)

DASHBOARD_HTML: Final[str] = "".join(f"{line}\n" for line in _LINES)
DASHBOARD_BYTES: Final[bytes] = DASHBOARD_HTML.encode("utf-8")
