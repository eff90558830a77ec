from .newblock import main

main()
