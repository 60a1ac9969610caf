from fivewords import main

main()
