LANDING_TXT = """
<div style="text-align: center">

# 🧠 NeuroPath

### Let's start this magical journey<br>to bloom your child.

</div>
"""

ABOUT_TXT = """
### 🧭 What you can do here

- **👤 My Info**: keep the parent/caretaker name and your child's details.
- **🤸 Exercises**: four guided exercises with step-by-step instructions.
  Tick *Mark as Completed* when you are done; it is saved for today.
- **🌸 Stress Release**: the Calming Flower Game. Tap the flowers, beat
  today's high score.
- **📅 Logs**: pick any date to see which exercises were completed and
  that day's flower game high score.

Everything is stored locally on this machine as small JSON files. Nothing
is sent anywhere.
"""
