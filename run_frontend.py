"""
Frontend server runner script.

Starts the Streamlit application for the Loan Tracker.

Usage:
    python run_frontend.py

Or with Streamlit CLI:
    streamlit run loan_tracker/streamlit_app.py
"""

import subprocess
import sys
import os

if __name__ == "__main__":
    # Get the path to the streamlit app
    script_dir = os.path.dirname(os.path.abspath(__file__))
    app_path = os.path.join(script_dir, "loan_tracker", "streamlit_app.py")

    print("Starting Loan Tracker frontend...")
    print(f"Backend: {os.getenv('LOAN_TRACKER_BACKEND_URL', 'http://localhost:8000')}")
    print("Press Ctrl+C to stop")

    subprocess.run([sys.executable, "-m", "streamlit", "run", app_path])
