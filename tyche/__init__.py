# tyche
# Signup / login desktop forms
